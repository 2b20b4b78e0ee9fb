from pydantic import BaseModel, Field
from typing import List, Optional


CONTACT_FIELDS = ("stage_name", "legal_name", "phone", "email", "instagram_handle")


class FieldConfidences(BaseModel):
    """Per-field confidence. Each score is independent of the others."""
    stage_name: float = Field(default=0.0, ge=0.0, le=1.0)
    legal_name: float = Field(default=0.0, ge=0.0, le=1.0)
    phone: float = Field(default=0.0, ge=0.0, le=1.0)
    email: float = Field(default=0.0, ge=0.0, le=1.0)
    instagram_handle: float = Field(default=0.0, ge=0.0, le=1.0)


class ContactCandidate(BaseModel):
    """Partial or complete contact record produced by one parsing strategy."""
    stage_name: Optional[str] = None  # DJ / performer name
    legal_name: Optional[str] = None
    phone: Optional[str] = None  # XXX-XXX-XXXX when canonicalized
    email: Optional[str] = None
    instagram_handle: Optional[str] = None  # always starts with "@"
    confidence: FieldConfidences = Field(default_factory=FieldConfidences)

    def assign(self, field_name: str, value: Optional[str], confidence: float) -> None:
        """Set a field together with its confidence. Empty values clear the field."""
        if value:
            setattr(self, field_name, value)
            setattr(self.confidence, field_name, confidence)
        else:
            self.clear(field_name)

    def clear(self, field_name: str) -> None:
        setattr(self, field_name, None)
        setattr(self.confidence, field_name, 0.0)

    def populated_fields(self) -> List[str]:
        return [name for name in CONTACT_FIELDS if getattr(self, name)]


class ParsedContact(ContactCandidate):
    raw_input: Optional[str] = Field(default=None, description="Text exactly as the caller supplied it")


class ParseOutcome(BaseModel):
    success: bool = Field(..., description="False only for empty input or when no name could be identified")
    data: ParsedContact = Field(default_factory=ParsedContact)
    errors: List[str] = Field(default_factory=list, description="Hard failures")
    warnings: List[str] = Field(default_factory=list, description="Advisory issues that do not block success")
    cleaned_lines: List[str] = Field(
        default_factory=list,
        description="Input lines with list decoration stripped, for manual field assignment",
    )
    requires_manual_assignment: bool = Field(
        default=False,
        description="True when the result is too uncertain to populate a form automatically",
    )
    strategy: Optional[str] = Field(default=None, description="Parsing strategy that produced the data")


class ParseRequest(BaseModel):
    text: str = Field(..., description="Freeform contact blurb pasted by staff")
    prefer_structured: bool = Field(
        default=False,
        description="Treat lines as legal name, stage name, phone, email, Instagram in that order",
    )
