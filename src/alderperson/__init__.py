"""Chicago ward and alderperson lookup."""
