"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from workout_finder.core.viewport import ViewportSettings


# Zoom levels supported by common web map tile servers
ZOOM_RANGE = (0, 21)


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        feed_path: Saved spreadsheet export to read workouts from
        region: Default region slug when none is given on the command line
        log_level: Logging level name
        viewport: Map framing parameters
    """
    feed_path: str | None = None
    region: str | None = None
    log_level: str = "INFO"
    viewport: ViewportSettings = field(default_factory=ViewportSettings)


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_zoom(zoom: int, field_name: str) -> list[ValidationError]:
    """Validate that a zoom level is one map tiles exist for.

    Pure function.
    """
    low, high = ZOOM_RANGE
    if low <= zoom <= high:
        return []
    return [ValidationError(
        field=field_name,
        message=f"Zoom {zoom} out of range [{low}, {high}]",
    )]


def validate_viewport(settings: ViewportSettings, field_name: str) -> list[ValidationError]:
    """Validate viewport settings.

    Pure function.

    Args:
        settings: Viewport settings to validate
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    errors.extend(validate_coordinates(
        settings.default_center.lat,
        settings.default_center.lng,
        f"{field_name}.default_center",
    ))
    errors.extend(validate_zoom(settings.min_zoom, f"{field_name}.min_zoom"))
    errors.extend(validate_zoom(settings.max_zoom, f"{field_name}.max_zoom"))
    errors.extend(validate_zoom(settings.wide_zoom, f"{field_name}.wide_zoom"))

    if settings.min_zoom > settings.max_zoom:
        errors.append(ValidationError(
            field=field_name,
            message=f"min_zoom ({settings.min_zoom}) > max_zoom ({settings.max_zoom})",
        ))

    previous = 0.0
    for i, tier in enumerate(settings.zoom_thresholds):
        tier_field = f"{field_name}.zoom_thresholds[{i}]"
        if tier.max_distance_km <= previous:
            errors.append(ValidationError(
                field=tier_field,
                message=(
                    f"Distance {tier.max_distance_km} km must be positive and "
                    f"greater than the previous tier ({previous} km)"
                ),
            ))
        errors.extend(validate_zoom(tier.zoom, f"{tier_field}.zoom"))
        previous = max(previous, tier.max_distance_km)

    if settings.earth_radius_km <= 0:
        errors.append(ValidationError(
            field=f"{field_name}.earth_radius_km",
            message=f"Radius must be positive, got {settings.earth_radius_km}",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    errors.extend(validate_viewport(config.viewport, "viewport"))

    if not config.feed_path:
        errors.append(ValidationError(
            field="feed_path",
            message="No feed path configured",
            severity="warning",
        ))
    elif config.feed_path.startswith("${"):
        errors.append(ValidationError(
            field="feed_path",
            message="Feed path not resolved (still contains placeholder)",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
