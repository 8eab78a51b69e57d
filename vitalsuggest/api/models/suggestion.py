"""
Request and response models for the health suggestion endpoint.
"""
from pydantic import BaseModel, ConfigDict, Field


class HealthReading(BaseModel):
    """Vital-sign readings submitted for assessment.

    - temp: body temperature in degrees Celsius
    - pulse: pulse rate in beats per minute
    - spO2: blood-oxygen saturation in percent
    - language: language the suggestion should be written in

    Values are not range-checked; physiologically impossible readings are
    forwarded as given.
    """
    model_config = ConfigDict(strict=True)

    temperature: float = Field(
        ...,
        alias="temp",
        description="Body temperature in °C",
        examples=[37.4],
    )
    pulse_rate: float = Field(
        ...,
        alias="pulse",
        description="Pulse rate in BPM",
        examples=[72.3],
    )
    oxygen_saturation: float = Field(
        ...,
        alias="spO2",
        description="Blood-oxygen saturation in %",
        examples=[98.1],
    )
    language: str = Field(
        ...,
        description="Language of the returned suggestion",
        examples=["English", "Spanish"],
    )


class SuggestionResult(BaseModel):
    """Response model carrying the provider's assessment text."""
    suggestion: str = Field(..., description="Health assessment and recommendations")
