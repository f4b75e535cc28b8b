from pydantic import BaseModel, Field, model_validator


class MonitorSettings(BaseModel):
    """Thresholds and polling interval for the battery watcher.

    The defaults are the values the tool ships with; nothing overrides them at runtime.
    """
    LOW_BATTERY_THRESHOLD: int = Field(20, ge=0, le=100, description="Notify to charge at or below this percent")
    HIGH_BATTERY_THRESHOLD: int = Field(80, ge=0, le=100, description="Notify to unplug at or above this percent")
    POLL_INTERVAL: float = Field(60.0, gt=0, description="Seconds between two battery checks")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_thresholds(self):
        if self.LOW_BATTERY_THRESHOLD >= self.HIGH_BATTERY_THRESHOLD:
            raise ValueError(
                f"LOW_BATTERY_THRESHOLD ({self.LOW_BATTERY_THRESHOLD}) must be below HIGH_BATTERY_THRESHOLD ({self.HIGH_BATTERY_THRESHOLD})"
            )
        return self
