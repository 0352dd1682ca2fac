from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .errors import WardNotFound

RAW_TEXT_PREVIEW_CHARS = 1000


class PageSnapshot(BaseModel):
    """Visible text plus table cell texts captured from the results page."""

    text: str = ""
    tables: list[list[list[str]]] = Field(default_factory=list)


class RawExtraction(BaseModel):
    ward: str | None = None
    alderperson: str | None = None
    office_address: str | None = None
    ward_phone: str | None = None
    raw_text: str = ""

    @field_validator("raw_text")
    @classmethod
    def _bound_preview(cls, value: str) -> str:
        return value[:RAW_TEXT_PREVIEW_CHARS]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def found(self) -> bool:
        return self.ward is not None or self.alderperson is not None


class ResolvedWard(BaseModel):
    ward: str
    alderperson: str | None = None
    office_address: str | None = None
    ward_phone: str | None = None

    @classmethod
    def from_extraction(cls, extraction: RawExtraction) -> "ResolvedWard":
        if not extraction.found or extraction.ward is None:
            raise WardNotFound("No ward information found in results")
        return cls(
            ward=extraction.ward,
            alderperson=extraction.alderperson,
            office_address=extraction.office_address,
            ward_phone=extraction.ward_phone,
        )


class AlderpersonRecord(BaseModel):
    """One row of the city's ward offices dataset."""

    ward: str | None = None
    alderman: str | None = None
    alderperson: str | None = None
    name: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | dict | None = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class LookupResponse(BaseModel):
    success: bool = True
    alderperson: str
    ward: str
    contact: str
    address: str
    ward_office: str | None = Field(default=None, alias="wardOffice")
    ward_phone: str | None = Field(default=None, alias="wardPhone")

    model_config = ConfigDict(populate_by_name=True)
