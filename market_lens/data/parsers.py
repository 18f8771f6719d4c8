"""
Parsers converting raw OHLCV records and provider payloads into price series.

Two input shapes are supported: a list of bar records
(``{date, open, high, low, close, volume}``) and a chart-style provider
payload with parallel timestamp and quote arrays. Nothing here performs I/O.
"""

from datetime import date, datetime, timezone
from typing import Any, Iterable, Mapping, Union

import orjson

from ..errors import MalformedDataError, MissingDataError
from ..logging.config import get_logger
from .models import DAILY, PriceBar, PriceSeries
from .validators import SeriesValidator

logger = get_logger(__name__)

BAR_FIELDS = ("date", "open", "high", "low", "close", "volume")


def decode_json(raw_data: Union[str, bytes]) -> Any:
    """Decode a raw JSON document."""
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise MalformedDataError(
            f"Invalid JSON payload: {e}",
            raw_data=str(raw_data)[:100],
            expected_format="json",
        ) from e


def parse_date(value: Any) -> date:
    """Parse a bar date from a date, datetime or ISO-8601 string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError as e:
            raise MalformedDataError(
                f"Invalid bar date: {value}", raw_data=value, expected_format="YYYY-MM-DD"
            ) from e
    raise MalformedDataError(f"Invalid bar date type: {type(value).__name__}", raw_data=str(value))


def _parse_number(record: Mapping[str, Any], name: str) -> float:
    value = record[name]
    if isinstance(value, bool):
        raise MalformedDataError(f"Invalid {name} value: {value}", raw_data=str(record)[:100])
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(
            f"Invalid {name} value: {value}", raw_data=str(record)[:100], expected_format="number"
        ) from e


def parse_bar(record: Mapping[str, Any]) -> PriceBar:
    """Parse a single bar record."""
    missing = [name for name in BAR_FIELDS if name not in record or record[name] is None]
    if missing:
        raise MalformedDataError(
            f"Bar record missing fields: {missing}",
            raw_data=str(record)[:100],
            expected_format=", ".join(BAR_FIELDS),
        )

    return PriceBar(
        date=parse_date(record["date"]),
        open=_parse_number(record, "open"),
        high=_parse_number(record, "high"),
        low=_parse_number(record, "low"),
        close=_parse_number(record, "close"),
        volume=_parse_number(record, "volume"),
    )


def parse_bars(records: Iterable[Mapping[str, Any]]) -> PriceSeries:
    """
    Parse bar records into a validated daily series.

    Args:
        records: Bar mappings in chronological order

    Returns:
        Validated daily PriceSeries

    Raises:
        MalformedDataError: If a record is incomplete or violates OHLC invariants
        TemporalDataError: If dates are duplicated or out of order
    """
    series = PriceSeries.from_bars((parse_bar(record) for record in records), granularity=DAILY)
    SeriesValidator().validate_series(series)
    return series


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedDataError(
            f"Chart {what} must be an object, got {type(value).__name__}",
            raw_data=str(value)[:100],
            expected_format="chart payload",
        )
    return value


def _parse_timestamp(value: Any) -> date:
    if isinstance(value, bool):
        raise MalformedDataError(f"Invalid timestamp: {value}", raw_data=str(value))
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc).date()
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise MalformedDataError(
            f"Invalid timestamp: {value}", raw_data=str(value)[:100], expected_format="unix seconds"
        ) from e


def parse_chart_payload(payload: Union[Mapping[str, Any], str, bytes]) -> PriceSeries:
    """
    Parse a chart-style provider payload into a validated daily series.

    Expected shape::

        {"chart": {"result": [{"timestamp": [...],
                               "indicators": {"quote": [{"open": [...], "high": [...],
                                                          "low": [...], "close": [...],
                                                          "volume": [...]}]}}]}}

    Rows with any null OHLCV value are skipped. Prices are rounded to two
    decimals, volume to a whole number and timestamps become UTC dates.

    Raises:
        MissingDataError: If the payload carries no result
        MalformedDataError: If the payload shape, a timestamp or a value is invalid
    """
    if isinstance(payload, (str, bytes)):
        payload = decode_json(payload)

    payload = _require_mapping(payload, "payload")
    chart = _require_mapping(payload.get("chart") or {}, "chart")
    results = chart.get("result") or []
    if not results:
        raise MissingDataError("No data returned by the market data provider", data_type="chart")
    if not isinstance(results, list):
        raise MalformedDataError("Chart result must be a list", raw_data=str(results)[:100])

    result = _require_mapping(results[0], "result")
    timestamps = result.get("timestamp") or []
    indicators = _require_mapping(result.get("indicators") or {}, "indicators")
    quotes = _require_mapping((indicators.get("quote") or [{}])[0], "quote")

    def column(name: str) -> list:
        return quotes.get(name) or []

    opens, highs, lows, closes, volumes = (column(n) for n in ("open", "high", "low", "close", "volume"))

    records = []
    skipped = 0
    for i, ts in enumerate(timestamps):
        row = dict(zip(
            BAR_FIELDS[1:],
            (values[i] if i < len(values) else None for values in (opens, highs, lows, closes, volumes)),
        ))
        if any(value is None for value in row.values()):
            skipped += 1
            continue

        records.append({
            "date": _parse_timestamp(ts),
            "open": round(_parse_number(row, "open"), 2),
            "high": round(_parse_number(row, "high"), 2),
            "low": round(_parse_number(row, "low"), 2),
            "close": round(_parse_number(row, "close"), 2),
            "volume": round(_parse_number(row, "volume")),
        })

    logger.debug("Parsed chart payload", bars=len(records), skipped_rows=skipped)
    return parse_bars(records)
