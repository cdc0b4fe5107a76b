from enum import Enum
from pydantic import BaseModel, ConfigDict

def _format_amount(amount: int | float) -> str:
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)

class Cpu(BaseModel):
    """CPU amount in millicores, rendered as `<n>m`"""
    model_config = ConfigDict(frozen=True, extra='forbid')

    millis: int

    @classmethod
    def from_millis(cls, amount: int) -> 'Cpu':
        return cls(millis=amount)

    @classmethod
    def from_cores(cls, amount: int | float) -> 'Cpu':
        return cls(millis=round(amount * 1000))

    def as_string(self) -> str:
        return f'{self.millis}m'

class SizeUnit(Enum):
    KIBIBYTES = 'Ki'
    MEBIBYTES = 'Mi'
    GIBIBYTES = 'Gi'
    TEBIBYTES = 'Ti'
    PEBIBYTES = 'Pi'

class Size(BaseModel):
    """Memory amount in binary units, rendered as `<amount><unit>`"""
    model_config = ConfigDict(frozen=True, extra='forbid')

    amount: int | float
    unit: SizeUnit

    @classmethod
    def kibibytes(cls, amount: int | float) -> 'Size':
        return cls(amount=amount, unit=SizeUnit.KIBIBYTES)

    @classmethod
    def mebibytes(cls, amount: int | float) -> 'Size':
        return cls(amount=amount, unit=SizeUnit.MEBIBYTES)

    @classmethod
    def gibibytes(cls, amount: int | float) -> 'Size':
        return cls(amount=amount, unit=SizeUnit.GIBIBYTES)

    @classmethod
    def tebibytes(cls, amount: int | float) -> 'Size':
        return cls(amount=amount, unit=SizeUnit.TEBIBYTES)

    @classmethod
    def pebibytes(cls, amount: int | float) -> 'Size':
        return cls(amount=amount, unit=SizeUnit.PEBIBYTES)

    def as_string(self) -> str:
        return f'{_format_amount(self.amount)}{self.unit.value}'
