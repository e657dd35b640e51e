"""
Pydantic Schemas - Data Models

Defines the record produced by the extractor and consumed by the report.

Usage:
    from utils.schemas import PollenRecord

    record = PollenRecord(name="Tree Pollen", status="Low")
"""

from pydantic import BaseModel, ConfigDict, Field


class PollenRecord(BaseModel):
    """One pollen or allergen category and its severity label.

    Both fields are free text as found in the page markup. Empty strings
    are allowed; the status is not checked against a fixed set of levels.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Category label, e.g. 'Tree Pollen'")
    status: str = Field(..., description="Severity label, e.g. 'Low'")
