from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime


class RFPItem(BaseModel):
    name: str
    quantity: int = Field(ge=1)
    specifications: Optional[str] = None


class ParsedRequest(BaseModel):
    """Structured RFP draft produced by one interpretation pass."""
    title: str
    description: str
    items: List[RFPItem] = Field(min_length=1)
    budget: int = Field(gt=0)
    delivery_deadline: datetime = Field(alias="deliveryDeadline")
    payment_terms: str = Field(alias="paymentTerms")
    warranty_requirement: str = Field(alias="warrantyRequirement")

    class Config:
        populate_by_name = True

    def to_payload(self) -> Dict[str, Any]:
        # Wire format expected by the RFP service
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class InterpretRequest(BaseModel):
    text: str


class DraftPreviewRead(BaseModel):
    has_draft: bool
    draft: Optional[ParsedRequest] = None
    hint: Optional[str] = None


class RFPConfirmRead(BaseModel):
    message: str
    rfp: Dict[str, Any]
