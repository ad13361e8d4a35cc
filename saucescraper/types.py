from dataclasses import asdict, dataclass


NOT_AVAILABLE = "N/A"


@dataclass
class Product:
    id: int
    name: str
    description: str
    price: str

    def to_dict(self) -> dict:
        return asdict(self)
