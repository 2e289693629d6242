from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from algorithms.grover import DEFAULT_MAX_STATES


class DashboardSettings(BaseSettings):
    """Display limits and slider bounds, overridable through QAE_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="QAE_",
        extra="ignore",
        case_sensitive=False,
    )

    grover_min_qubits: int = Field(default=2, ge=1)
    grover_max_qubits: int = Field(default=8, ge=1)
    qft_min_qubits: int = Field(default=2, ge=1)
    qft_max_qubits: int = Field(default=6, ge=1)
    qpe_min_precision: int = Field(default=3, ge=1)
    qpe_max_precision: int = Field(default=8, ge=1)
    display_limit: int = Field(default=10, ge=1, description="Bars shown in result charts")
    qft_display_states: int = Field(default=8, ge=1)
    max_enumerated_states: int = Field(default=DEFAULT_MAX_STATES, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self):
        for low, high in (("grover_min_qubits", "grover_max_qubits"),
                          ("qft_min_qubits", "qft_max_qubits"),
                          ("qpe_min_precision", "qpe_max_precision")):
            if getattr(self, low) > getattr(self, high):
                raise ValueError(
                    f"{low}={getattr(self, low)} exceeds {high}={getattr(self, high)}"
                )
        return self


# Defaults without reading the environment
DEFAULTS = DashboardSettings.model_construct().model_dump()


def get_dashboard_config(**overrides) -> dict:
    """
    Return the dashboard's display limits and slider bounds.

    Keyword overrides win over ``QAE_<KEY>`` environment variables, which win
    over the defaults. Invalid settings never raise: every value falls back to
    its default and the problem is reported in the returned dict.

    Returns a dict with every DashboardSettings field plus:
        warning (str or None)
    """
    try:
        settings = DashboardSettings(**overrides)
        warning = None
    except ValidationError as e:
        problems = []
        for err in e.errors():
            where = ".".join(str(part) for part in err["loc"])
            problems.append(f"{where}: {err['msg']}" if where else err["msg"])
        settings = DashboardSettings.model_construct()
        warning = "Ignored invalid settings: " + "; ".join(problems) + ". Using defaults instead."

    result = settings.model_dump()
    result["warning"] = warning
    return result
