from dataclasses import dataclass, field
from string import digits

from ..exceptions import InvalidArgumentError
from ..utils.constants import NIP_LEN, CustomerKind, CustomerType
from .vehicle import check_text


def is_valid_nip(value: str) -> bool:
    """A tax number (NIP) is exactly ten ASCII digits."""
    return len(value) == NIP_LEN and all(ch in digits for ch in value)


@dataclass(eq=False)
class Customer:
    """
    Base customer model. The identifying document number doubles as the
    customer id, so subclasses only differ in what that document is called.
    """
    name: str
    address: str
    customer_id: str = field(default="")

    kind = ""
    label = "Customer"
    document_label = "ID"

    def __post_init__(self):
        check_text(self.customer_id, "ID")
        check_text(self.name, "Name")
        check_text(self.address, "Address")

    @property
    def id(self) -> str:
        return self.customer_id

    def get_type(self) -> CustomerType:
        raise NotImplementedError

    def get_info(self) -> str:
        return (
            f"{self.label} [{self.customer_id}]: {self.name}\n"
            f"  Address: {self.address}\n"
            f"  {self.document_label}: {self.customer_id}"
        )

    def to_fields(self) -> list:
        """Field values after the type tag, in data-file order."""
        return [self.name, self.address, self.customer_id]

    def __eq__(self, other):
        if not isinstance(other, Customer):
            return NotImplemented
        return self.customer_id == other.customer_id

    def __hash__(self):
        return hash(self.customer_id)

    def __str__(self) -> str:
        return self.get_info()


class PrivateCustomer(Customer):
    """Private customers are identified by their ID card number."""

    kind = CustomerKind.PRIVATE
    label = "Private Customer"
    document_label = "ID Card"

    def __init__(self, name: str, address: str, id_card: str):
        super().__init__(name=name, address=address, customer_id=id_card)

    @property
    def id_card(self) -> str:
        return self.customer_id

    def get_type(self) -> CustomerType:
        return CustomerType.PRIVATE


class BusinessCustomer(Customer):
    """Business customers are identified by a 10-digit tax number (NIP)."""

    kind = CustomerKind.BUSINESS
    label = "Business Customer"
    document_label = "NIP"

    def __init__(self, name: str, address: str, nip: str):
        super().__init__(name=name, address=address, customer_id=nip)
        if not is_valid_nip(nip):
            raise InvalidArgumentError(f"Invalid NIP. It must consist of exactly {NIP_LEN} digits.")

    @property
    def nip(self) -> str:
        return self.customer_id

    def get_type(self) -> CustomerType:
        return CustomerType.BUSINESS
