from pydantic import BaseModel


class SupplierName(BaseModel):
    name: str


class SupplierBankInfo(BaseModel):
    name: str
    tax_id: str | None = None


class BankSupplierCount(BaseModel):
    bank_address_city: str
    supplier_count: int


class MaterialAssortment(BaseModel):
    material_name: str
    class_code: str | None = None


class TotalAmount(BaseModel):
    total_amount: float | None  # None == aucune ligne sur la période (pas 0)


class InventoryValue(BaseModel):
    material_name: str
    total_quantity: float
    total_value: float


class SupplierShare(BaseModel):
    supplier_share: float | None  # None == total du groupe absent ou nul


class MonthlyLoad(BaseModel):
    month: int
    monthly_value: float


class OrderBankInfo(BaseModel):
    bank_address_city: str | None = None
    total_amount: float
