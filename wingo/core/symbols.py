from enum import Enum


class Symbol(str, Enum):
    BIG = "B"
    SMALL = "S"

    @property
    def label(self) -> str:
        return "Big" if self is Symbol.BIG else "Small"

    @classmethod
    def from_label(cls, label: str) -> "Symbol":
        # 'Big' / 'Small' as stored on Draw rows
        return cls(label[:1].upper())


def classify(number: int) -> Symbol:
    return Symbol.BIG if number >= 5 else Symbol.SMALL
