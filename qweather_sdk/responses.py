"""
QWeather Response Models

Pydantic schemas for the JSON payloads returned by each endpoint.
Field names follow the provider's camelCase keys. Unknown keys are kept
on item models so that fields added upstream are not lost.

Reference: https://dev.qweather.com/docs/api/
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .locations import LocationID, StormId


class ResponseItem(BaseModel):
    """Base for nested records."""

    model_config = ConfigDict(extra="allow")


class Refer(ResponseItem):
    """Data sources and licenses attached to a payload."""

    sources: list[str] = Field(default_factory=list)
    license: list[str] = Field(default_factory=list)


class QWeatherResponse(BaseModel):
    """
    Common envelope.

    ``code`` is the provider status as a string; "200" means success and is
    the only value a decoded response can hold.
    """

    code: str
    updateTime: str | None = None  # noqa: N815
    fxLink: str | None = None  # noqa: N815
    refer: Refer = Field(default_factory=Refer)


# -----------------------------------------------------------------------------
# City Weather
# -----------------------------------------------------------------------------


class WeatherNowData(ResponseItem):
    obsTime: str  # noqa: N815
    temp: str
    feelsLike: str  # noqa: N815
    icon: str
    text: str
    wind360: str
    windDir: str  # noqa: N815
    windScale: str  # noqa: N815
    windSpeed: str  # noqa: N815
    humidity: str
    precip: str
    pressure: str
    vis: str
    cloud: str | None = None
    dew: str | None = None


class WeatherNow(QWeatherResponse):
    now: WeatherNowData | None = None


class DailyForecast(ResponseItem):
    fxDate: str  # noqa: N815
    sunrise: str | None = None
    sunset: str | None = None
    moonrise: str | None = None
    moonset: str | None = None
    moonPhase: str  # noqa: N815
    moonPhaseIcon: str  # noqa: N815
    tempMax: str  # noqa: N815
    tempMin: str  # noqa: N815
    iconDay: str  # noqa: N815
    textDay: str  # noqa: N815
    iconNight: str  # noqa: N815
    textNight: str  # noqa: N815
    wind360Day: str  # noqa: N815
    windDirDay: str  # noqa: N815
    windScaleDay: str  # noqa: N815
    windSpeedDay: str  # noqa: N815
    wind360Night: str  # noqa: N815
    windDirNight: str  # noqa: N815
    windScaleNight: str  # noqa: N815
    windSpeedNight: str  # noqa: N815
    humidity: str
    precip: str
    pressure: str
    vis: str
    cloud: str | None = None
    uvIndex: str  # noqa: N815


class WeatherDaily(QWeatherResponse):
    daily: list[DailyForecast] = Field(default_factory=list)


class HourlyForecast(ResponseItem):
    fxTime: str  # noqa: N815
    temp: str
    icon: str
    text: str
    wind360: str
    windDir: str  # noqa: N815
    windScale: str  # noqa: N815
    windSpeed: str  # noqa: N815
    humidity: str
    precip: str
    pressure: str
    pop: str | None = None
    cloud: str | None = None
    dew: str | None = None


class WeatherHourly(QWeatherResponse):
    hourly: list[HourlyForecast] = Field(default_factory=list)


# -----------------------------------------------------------------------------
# Grid Weather
# -----------------------------------------------------------------------------


class GridNowData(ResponseItem):
    obsTime: str  # noqa: N815
    temp: str
    icon: str
    text: str
    wind360: str
    windDir: str  # noqa: N815
    windScale: str  # noqa: N815
    windSpeed: str  # noqa: N815
    humidity: str
    precip: str
    pressure: str
    cloud: str | None = None
    dew: str | None = None


class GridNow(QWeatherResponse):
    now: GridNowData | None = None


class GridDailyForecast(ResponseItem):
    fxDate: str  # noqa: N815
    tempMax: str  # noqa: N815
    tempMin: str  # noqa: N815
    iconDay: str  # noqa: N815
    iconNight: str  # noqa: N815
    textDay: str  # noqa: N815
    textNight: str  # noqa: N815
    wind360Day: str  # noqa: N815
    windDirDay: str  # noqa: N815
    windScaleDay: str  # noqa: N815
    windSpeedDay: str  # noqa: N815
    wind360Night: str  # noqa: N815
    windDirNight: str  # noqa: N815
    windScaleNight: str  # noqa: N815
    windSpeedNight: str  # noqa: N815
    humidity: str
    precip: str
    pressure: str
    cloud: str | None = None


class GridDaily(QWeatherResponse):
    daily: list[GridDailyForecast] = Field(default_factory=list)


class GridHourly(QWeatherResponse):
    hourly: list[HourlyForecast] = Field(default_factory=list)


# -----------------------------------------------------------------------------
# Minutely Precipitation
# -----------------------------------------------------------------------------


class MinutelyPrecip(ResponseItem):
    fxTime: str  # noqa: N815
    precip: str
    type: str


class RainMinutely(QWeatherResponse):
    summary: str | None = None
    minutely: list[MinutelyPrecip] = Field(default_factory=list)


# -----------------------------------------------------------------------------
# Weather Indices
# -----------------------------------------------------------------------------


class IndexForecast(ResponseItem):
    date: str
    type: str
    name: str
    level: str
    category: str
    text: str | None = None


class Indices(QWeatherResponse):
    daily: list[IndexForecast] = Field(default_factory=list)


# -----------------------------------------------------------------------------
# Air Quality
# -----------------------------------------------------------------------------


class AirNowData(ResponseItem):
    pubTime: str  # noqa: N815
    aqi: str
    level: str
    category: str
    primary: str
    pm10: str
    pm2p5: str
    no2: str
    so2: str
    co: str
    o3: str


class AirStation(AirNowData):
    id: str
    name: str


class AirNow(QWeatherResponse):
    now: AirNowData | None = None
    station: list[AirStation] = Field(default_factory=list)


class AirDailyForecast(ResponseItem):
    fxDate: str  # noqa: N815
    aqi: str
    level: str
    category: str
    primary: str


class AirDaily(QWeatherResponse):
    daily: list[AirDailyForecast] = Field(default_factory=list)


class Concentration(ResponseItem):
    value: str
    unit: str


class SubIndex(ResponseItem):
    value: str
    category: str | None = None


class Pollutant(ResponseItem):
    code: str
    name: str
    fullName: str  # noqa: N815
    concentration: Concentration
    subIndex: SubIndex | None = None  # noqa: N815


class PrimaryPollutant(ResponseItem):
    code: str | None = None
    name: str | None = None
    fullName: str | None = None  # noqa: N815


class AirIndex(ResponseItem):
    code: str
    name: str
    value: str
    level: str
    category: str
    color: str | dict[str, int] | None = None
    primaryPollutant: PrimaryPollutant | None = None  # noqa: N815


class StationRef(ResponseItem):
    id: str
    name: str


class AirBetaNow(QWeatherResponse):
    aqi: list[AirIndex] = Field(default_factory=list)
    pollutant: list[Pollutant] = Field(default_factory=list)
    station: list[StationRef] = Field(default_factory=list)
    source: list[str] = Field(default_factory=list)


class AirBetaStation(QWeatherResponse):
    pollutant: list[Pollutant] = Field(default_factory=list)
    source: list[str] = Field(default_factory=list)


# -----------------------------------------------------------------------------
# Astronomy
# -----------------------------------------------------------------------------


class Sun(QWeatherResponse):
    sunrise: str | None = None
    sunset: str | None = None


class MoonPhase(ResponseItem):
    fxTime: str  # noqa: N815
    value: str
    name: str
    illumination: str
    icon: str


class Moon(QWeatherResponse):
    moonrise: str | None = None
    moonset: str | None = None
    moonPhase: list[MoonPhase] = Field(default_factory=list)  # noqa: N815


class SolarElevationAngle(QWeatherResponse):
    solarElevationAngle: str | None = None  # noqa: N815
    solarAzimuthAngle: str | None = None  # noqa: N815
    solarHour: str | None = None  # noqa: N815
    hourAngle: str | None = None  # noqa: N815


# -----------------------------------------------------------------------------
# GeoAPI
# -----------------------------------------------------------------------------


class GeoLocation(ResponseItem):
    """A city, region or POI returned by GeoAPI."""

    id: str
    name: str
    lat: str
    lon: str
    adm1: str | None = None
    adm2: str | None = None
    country: str | None = None
    tz: str | None = None
    utcOffset: str | None = None  # noqa: N815
    isDst: str | None = None  # noqa: N815
    type: str | None = None
    rank: str | None = None
    fxLink: str | None = None  # noqa: N815

    def location_id(self) -> LocationID:
        return LocationID(self.id)


class GeoLookup(QWeatherResponse):
    location: list[GeoLocation] = Field(default_factory=list)


class GeoTop(QWeatherResponse):
    topCityList: list[GeoLocation] = Field(default_factory=list)  # noqa: N815


class GeoPoi(QWeatherResponse):
    poi: list[GeoLocation] = Field(default_factory=list)


# -----------------------------------------------------------------------------
# Ocean
# -----------------------------------------------------------------------------


class TideTableEntry(ResponseItem):
    fxTime: str  # noqa: N815
    height: str
    type: str


class TideHourly(ResponseItem):
    fxTime: str  # noqa: N815
    height: str


class Tide(QWeatherResponse):
    tideTable: list[TideTableEntry] = Field(default_factory=list)  # noqa: N815
    tideHourly: list[TideHourly] = Field(default_factory=list)  # noqa: N815


class CurrentsTableEntry(ResponseItem):
    fxTime: str  # noqa: N815
    speedMax: str  # noqa: N815
    dir360: str


class CurrentsHourly(ResponseItem):
    fxTime: str  # noqa: N815
    speed: str
    dir360: str


class Currents(QWeatherResponse):
    currentsTable: list[CurrentsTableEntry] = Field(default_factory=list)  # noqa: N815
    currentsHourly: list[CurrentsHourly] = Field(default_factory=list)  # noqa: N815


# -----------------------------------------------------------------------------
# Solar Radiation
# -----------------------------------------------------------------------------


class Radiation(ResponseItem):
    fxTime: str  # noqa: N815
    net: str
    diffuse: str
    direct: str


class SolarRadiation(QWeatherResponse):
    radiation: list[Radiation] = Field(default_factory=list)


# -----------------------------------------------------------------------------
# Time Machine
# -----------------------------------------------------------------------------


class HistoricalDay(ResponseItem):
    date: str
    sunrise: str | None = None
    sunset: str | None = None
    moonrise: str | None = None
    moonset: str | None = None
    moonPhase: str | None = None  # noqa: N815
    tempMax: str  # noqa: N815
    tempMin: str  # noqa: N815
    humidity: str
    precip: str
    pressure: str


class HistoricalHour(ResponseItem):
    time: str
    temp: str
    icon: str
    text: str
    precip: str
    wind360: str
    windDir: str  # noqa: N815
    windScale: str  # noqa: N815
    windSpeed: str  # noqa: N815
    humidity: str
    pressure: str


class HistoricalWeather(QWeatherResponse):
    weatherDaily: HistoricalDay | None = None  # noqa: N815
    weatherHourly: list[HistoricalHour] = Field(default_factory=list)  # noqa: N815


class HistoricalAir(QWeatherResponse):
    airHourly: list[AirNowData] = Field(default_factory=list)  # noqa: N815


# -----------------------------------------------------------------------------
# Tropical Cyclones
# -----------------------------------------------------------------------------


class Storm(ResponseItem):
    id: str
    name: str
    basin: str
    year: str
    isActive: str  # noqa: N815

    def storm_id(self) -> StormId:
        return StormId(self.id)


class StormList(QWeatherResponse):
    storm: list[Storm] = Field(default_factory=list)


class StormForecastPoint(ResponseItem):
    fxTime: str  # noqa: N815
    lat: str
    lon: str
    type: str
    pressure: str
    windSpeed: str  # noqa: N815
    moveSpeed: str  # noqa: N815
    moveDir: str  # noqa: N815
    move360: str


class StormForecast(QWeatherResponse):
    forecast: list[StormForecastPoint] = Field(default_factory=list)


class WindRadius(ResponseItem):
    neRadius: str  # noqa: N815
    seRadius: str  # noqa: N815
    swRadius: str  # noqa: N815
    nwRadius: str  # noqa: N815


class StormPosition(ResponseItem):
    lat: str
    lon: str
    type: str
    pressure: str
    windSpeed: str  # noqa: N815
    moveSpeed: str  # noqa: N815
    moveDir: str  # noqa: N815
    move360: str
    pubTime: str | None = None  # noqa: N815
    time: str | None = None
    windRadius30: WindRadius | None = None  # noqa: N815
    windRadius50: WindRadius | None = None  # noqa: N815
    windRadius64: WindRadius | None = None  # noqa: N815


class StormTrack(QWeatherResponse):
    isActive: str | None = None  # noqa: N815
    now: StormPosition | None = None
    track: list[StormPosition] = Field(default_factory=list)


# -----------------------------------------------------------------------------
# Warnings
# -----------------------------------------------------------------------------


class WarningItem(ResponseItem):
    id: str
    sender: str | None = None
    pubTime: str  # noqa: N815
    title: str
    startTime: str | None = None  # noqa: N815
    endTime: str | None = None  # noqa: N815
    status: str
    level: str | None = None
    severity: str
    severityColor: str | None = None  # noqa: N815
    type: str
    typeName: str  # noqa: N815
    urgency: str | None = None
    certainty: str | None = None
    text: str
    related: str | None = None


class WarningNow(QWeatherResponse):
    warning: list[WarningItem] = Field(default_factory=list)


class WarningLocation(ResponseItem):
    locationId: str  # noqa: N815

    def location_id(self) -> LocationID:
        return LocationID(self.locationId)


class WarningCityList(QWeatherResponse):
    warningLocList: list[WarningLocation] = Field(default_factory=list)  # noqa: N815
