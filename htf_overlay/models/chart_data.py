"""
Chart Data Models
Kerzen-Daten für Chart- und HTF-Serien
"""

import numbers
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Dict, Any
import pandas as pd


def to_decimal(value: Any) -> Decimal:
    """
    Konvertiert Preis-Wert zu Decimal

    Floats laufen über str(), damit keine binären Rundungsreste
    in die Preise gelangen (0.1 -> Decimal('0.1')).

    Raises:
        ValueError: Wenn der Wert keine Zahl ist
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Kein gültiger Preis: {value!r}")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Kein gültiger Preis: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Kein gültiger Preis: {value!r}")
    return result


def to_timestamp(value: Any) -> int:
    """
    Konvertiert Zeit-Wert zu Unix Timestamp (Sekunden)

    Raises:
        ValueError: Bei nicht endlichen oder nicht numerischen Werten
    """
    if isinstance(value, bool):
        raise ValueError(f"Kein gültiger Zeitstempel: {value!r}")
    try:
        return int(value)
    except OverflowError as e:
        raise ValueError(f"Kein gültiger Zeitstempel: {value!r}") from e


@dataclass(frozen=True)
class Candle:
    """
    Einzelne Chart-Kerze (OHLC)

    Attributes:
        time: Unix Timestamp der Eröffnung (Sekunden)
        open: Eröffnungspreis
        high: Höchstpreis
        low: Tiefstpreis
        close: Schlusspreis
        volume: Handelsvolumen (optional)
    """
    time: int
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Optional[Decimal] = None

    def to_dict(self) -> Dict[str, Any]:
        """Konvertiert Kerze zu Dictionary (Preise als String, verlustfrei)"""
        return {
            'time': self.time,
            'open': str(self.open),
            'high': str(self.high),
            'low': str(self.low),
            'close': str(self.close),
            'volume': str(self.volume) if self.volume is not None else None
        }

    @property
    def is_bullish(self) -> bool:
        """Bullish wenn Close >= Open"""
        return self.close >= self.open

    @property
    def body_top(self) -> Decimal:
        return max(self.open, self.close)

    @property
    def body_bottom(self) -> Decimal:
        return min(self.open, self.close)


class CandleFactory:
    """
    Factory für Kerzen-Erstellung aus verschiedenen Quellen
    """

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Candle:
        """
        Erstellt Kerze aus Dictionary

        Args:
            data: Dictionary mit Kerzen-Daten

        Returns:
            Candle-Objekt

        Example:
            >>> data = {'time': 1234567890, 'open': 100, 'high': 101, 'low': 99, 'close': 100.5}
            >>> candle = CandleFactory.from_dict(data)
        """
        volume = data.get('volume')
        return Candle(
            time=to_timestamp(data['time']),
            open=to_decimal(data['open']),
            high=to_decimal(data['high']),
            low=to_decimal(data['low']),
            close=to_decimal(data['close']),
            volume=to_decimal(volume) if volume is not None else None
        )

    @staticmethod
    def from_dataframe_row(row: pd.Series) -> Candle:
        """
        Erstellt Kerze aus Pandas DataFrame Row (flexible Spalten-Namen)
        Unterstützt sowohl uppercase (Open, High, Low, Close) als auch lowercase

        Args:
            row: Pandas Series mit Kerzen-Daten

        Returns:
            Candle-Objekt
        """
        def get_column_value(row, *possible_names):
            for name in possible_names:
                if name in row.index:
                    return row[name]
            raise KeyError(f"Keine der Spalten {possible_names} gefunden")

        # Zeit-Handling: Unix Timestamp, pd.Timestamp oder String
        time_val = get_column_value(row, 'time', 'Time', 'timestamp', 'Timestamp')
        if isinstance(time_val, pd.Timestamp):
            time_val = int(time_val.timestamp())
        elif isinstance(time_val, numbers.Real):
            time_val = to_timestamp(time_val)
        else:
            time_val = int(pd.Timestamp(time_val).timestamp())

        volume = None
        for name in ('volume', 'Volume'):
            if name in row.index and pd.notna(row[name]):
                volume = to_decimal(row[name])
                break

        return Candle(
            time=time_val,
            open=to_decimal(get_column_value(row, 'open', 'Open')),
            high=to_decimal(get_column_value(row, 'high', 'High')),
            low=to_decimal(get_column_value(row, 'low', 'Low')),
            close=to_decimal(get_column_value(row, 'close', 'Close')),
            volume=volume
        )


def candles_from_dicts(data: List[Dict[str, Any]]) -> List[Candle]:
    """Konvertiert Liste von Kerzen-Dictionaries (z.B. aus JSON)"""
    return [CandleFactory.from_dict(item) for item in data]


def candles_from_dataframe(df: pd.DataFrame) -> List[Candle]:
    """
    Konvertiert DataFrame zu Kerzen-Liste

    Ein DatetimeIndex wird als Zeit-Spalte übernommen, falls keine
    eigene Zeit-Spalte existiert.
    """
    if df is None or df.empty:
        return []

    columns = set(df.columns)
    if isinstance(df.index, pd.DatetimeIndex) and not columns & {'time', 'Time', 'timestamp', 'Timestamp'}:
        df = df.rename_axis('time').reset_index()

    return [CandleFactory.from_dataframe_row(row) for _, row in df.iterrows()]
