from pydantic import BaseModel, Field, ValidationError


class InvalidCoordinateError(ValueError):
  """Latitude or longitude outside its geographic range."""


class GeoCoordinate(BaseModel):
  latitude: float = Field(ge=-90, le=90)
  longitude: float = Field(ge=-180, le=180)


def validate_coordinates(latitude: float, longitude: float) -> GeoCoordinate:
  try:
    return GeoCoordinate(latitude=latitude, longitude=longitude)
  except ValidationError as e:
    raise InvalidCoordinateError(
      f"invalid coordinate ({latitude}, {longitude}): {e.errors()[0]['msg']}"
    ) from e
