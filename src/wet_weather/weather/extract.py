"""Field extraction from the provider's tag-delimited weather documents.

The provider answers with loosely structured markup. Rather than parsing it,
fields are located by literal markers and read up to a closing character.
Every lookup happens inside a :class:`TextView`, an immutable window over the
document, so a nested field is only searched for inside its parent section and
a truncated document can never be read past its end.
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import (
    FORECAST_DAYS,
    NOT_FOUND,
    UV,
    Barometer,
    CurrentConditions,
    DayPart,
    FieldValue,
    ForecastDay,
    Found,
    Location,
    ProviderError,
    Units,
    WeatherRecord,
    Wind,
)

TAG_CLOSE = "<"
QUOTE = '"'


@dataclass(frozen=True, slots=True)
class TextView:
    """Window ``[start, end)`` over a document."""

    text: str
    start: int
    end: int

    @classmethod
    def of(cls, text: str) -> TextView:
        return cls(text, 0, len(text))

    def find(self, marker: str) -> int:
        """Absolute offset of the first match inside the window, or -1."""
        return self.text.find(marker, self.start, self.end)

    def after(self, offset: int) -> TextView:
        offset = min(max(offset, self.start), self.end)
        return TextView(self.text, offset, self.end)

    def section(self, marker: str, close_tag: str | None = None) -> TextView | None:
        """Window starting at ``marker`` and ending at ``close_tag``.

        Without a closing tag in range the section runs to the end of this
        window.
        """
        begin = self.find(marker)
        if begin < 0:
            return None
        finish = self.end
        if close_tag is not None:
            closing = self.text.find(close_tag, begin + len(marker), self.end)
            if closing >= 0:
                finish = closing
        return TextView(self.text, begin, finish)

    def value(self, marker: str, close_char: str = TAG_CLOSE) -> str | None:
        """Verbatim text between ``marker`` and the next ``close_char``."""
        begin = self.find(marker)
        if begin < 0:
            return None
        begin += len(marker)
        finish = self.text.find(close_char, begin, self.end)
        if finish < 0:
            return None
        return self.text[begin:finish]

    def field(self, marker: str, close_char: str = TAG_CLOSE) -> FieldValue:
        found = self.value(marker, close_char)
        if found is None:
            return NOT_FOUND
        return Found(value=found)


def extract_location_id(document: str) -> str:
    """Return the first location id of a search response, or an empty string."""
    return TextView.of(document).value('<loc id="', QUOTE) or ""


def extract_weather(document: str, location_id: str = "") -> WeatherRecord:
    """Extract a full :class:`WeatherRecord` from a weather document."""
    view = TextView.of(document)

    error = _extract_error(view)
    if error is not None and error.kind and error.message:
        return WeatherRecord(location_id=location_id, error=error)

    return WeatherRecord(
        location_id=location_id,
        error=error,
        units=_extract_units(view),
        location=_extract_location(view),
        current_conditions=_extract_current_conditions(view),
        forecasts=_extract_forecasts(view),
    )


def _extract_error(view: TextView) -> ProviderError | None:
    block = view.section("<error>", "</error>")
    if block is None:
        return None
    err = block.section('<err type="')
    if err is None:
        return None
    kind = err.value('<err type="', QUOTE) or ""
    message = ""
    tag_end = err.find(">")
    if tag_end >= 0:
        message = err.after(tag_end).value(">", TAG_CLOSE) or ""
    if not kind and not message:
        return None
    return ProviderError(kind=kind, message=message)


def _extract_units(view: TextView) -> Units:
    # Only filled when present; absence leaves the label empty.
    return Units(
        temperature=view.value("<ut>") or "",
        distance=view.value("<ud>") or "",
        speed=view.value("<us>") or "",
        pressure=view.value("<up>") or "",
        rainfall=view.value("<ur>") or "",
    )


def _extract_location(view: TextView) -> Location:
    block = view.section("<loc id=", "</loc>")
    if block is None:
        return Location()
    return Location(
        name=block.field("<dnam>"),
        latitude=block.field("<lat>"),
        longitude=block.field("<lon>"),
    )


def _extract_wind(parent: TextView) -> Wind:
    block = parent.section("<wind>", "</wind>")
    if block is None:
        return Wind()
    return Wind(
        gust=block.field("<gust>"),
        direction=block.field("<d>"),
        speed=block.field("<s>"),
        text=block.field("<t>"),
    )


def _extract_current_conditions(view: TextView) -> CurrentConditions:
    block = view.section("<cc>", "</cc>")
    if block is None:
        return CurrentConditions()

    moon = block.section("<moon>", "</moon>")
    uv = block.section("<uv>", "</uv>")
    bar = block.section("<bar>", "</bar>")
    return CurrentConditions(
        last_updated=block.field("<lsup>"),
        temperature=block.field("<tmp>"),
        dewpoint=block.field("<dewp>"),
        text=block.field("<t>"),
        visibility=block.field("<vis>"),
        humidity=block.field("<hmid>"),
        station=block.field("<obst>"),
        feels_like=block.field("<flik>"),
        moon_phase=moon.field("<t>") if moon is not None else NOT_FOUND,
        uv=UV(index=uv.field("<i>"), text=uv.field("<t>")) if uv is not None else UV(),
        barometer=(
            Barometer(direction=bar.field("<d>"), reading=bar.field("<r>"))
            if bar is not None
            else Barometer()
        ),
        wind=_extract_wind(block),
    )


def _extract_day_part(entry: TextView, marker: str) -> DayPart:
    part = entry.section(marker, "</part>")
    if part is None:
        return DayPart()
    return DayPart(
        text=part.field("<t>"),
        chance_of_precip=part.field("<ppcp>"),
        humidity=part.field("<hmid>"),
        wind=_extract_wind(part),
    )


def _extract_forecasts(view: TextView) -> list[ForecastDay]:
    block = view.section("<dayf>", "</dayf>")
    if block is None:
        return [
            ForecastDay(daytime=DayPart(), night=DayPart()) for _ in range(FORECAST_DAYS)
        ]

    days: list[ForecastDay] = []
    cursor = block
    for _ in range(FORECAST_DAYS):
        entry = cursor.section("<day d=", "</day>")
        if entry is None:
            # Only the direct scalars are marked; day and night parts stay unset.
            days.append(ForecastDay())
            continue
        days.append(
            ForecastDay(
                day_of_week=entry.field('t="', QUOTE),
                high=entry.field("<hi>"),
                low=entry.field("<low>"),
                sunset=entry.field("<suns>"),
                sunrise=entry.field("<sunr>"),
                daytime=_extract_day_part(entry, '<part p="d">'),
                night=_extract_day_part(entry, '<part p="n">'),
            )
        )
        cursor = cursor.after(entry.end + len("</day>"))
    return days
