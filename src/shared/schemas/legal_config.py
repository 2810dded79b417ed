from pydantic import BaseModel, ConfigDict

from src.server import config


class LegalConfig(BaseModel):
    """Legal and financial constants served to the frontend.

    Attribute names are the JSON keys of the payload.
    """

    model_config = ConfigDict(frozen=True)

    smic: float
    tax_rate_low: float
    tax_rate_high: float
    legal_points_method: str

    @classmethod
    def from_defaults(cls) -> "LegalConfig":
        """Build the record from the constants in the server config."""
        return cls(
            smic=config.LEGAL_SMIC,
            tax_rate_low=config.LEGAL_TAX_RATE_LOW,
            tax_rate_high=config.LEGAL_TAX_RATE_HIGH,
            legal_points_method=config.LEGAL_POINTS_METHOD,
        )
