"""Resolve NR-ARFCNs into bands, disambiguating overlapping band definitions."""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from .band_table import (
    BANDS_NR,
    SMALLEST_BANDWIDTH_KHZ,
    BandDefinition,
    arfcn_to_freq,
    bands_for_arfcn,
)


@dataclass(frozen=True)
class ResolvedBand:
    """Band information for one channel number.

    number and name are both None when the band is unknown. A name without a
    number means several bands of the same frequency class fit.
    """

    channel_number: int
    frequency_khz: int
    number: int | None = None
    name: str | None = None

    def to_dict(self) -> dict:
        return {
            'channel_number': self.channel_number,
            'frequency_khz': self.frequency_khz,
            'band_number': self.number,
            'band_name': self.name,
        }


def filter_by_hints(candidates: list[BandDefinition], band_hints: Iterable[int]) -> list[BandDefinition]:
    """Keep only candidates whose band number is one of band_hints.

    An empty hint set keeps everything.
    """
    hints = frozenset(band_hints)
    if not hints:
        return list(candidates)
    return [band for band in candidates if band.number is not None and band.number in hints]


def top_priority(candidates: list[BandDefinition]) -> list[BandDefinition]:
    """Return the candidates sharing the highest priority."""
    highest = max(band.priority for band in candidates)
    return [band for band in candidates if band.priority == highest]


def highest_unique_priority(candidates: list[BandDefinition]) -> BandDefinition | None:
    """Return the candidate with the highest priority if no other candidate shares it."""
    best = top_priority(candidates)
    if len(best) == 1:
        return best[0]
    return None


def is_on_raster(arfcn: int, band: BandDefinition) -> bool:
    """Check whether arfcn sits on band's channel raster.

    Assumes the smallest bandwidth (5 MHz) as raster spacing and the last ARFCN
    of the band as the anchor. Not every band supports 5 MHz but no band has
    anything narrower.
    """
    start_freq = arfcn_to_freq(band.high)
    target_freq = arfcn_to_freq(arfcn)
    return (start_freq - target_freq) % SMALLEST_BANDWIDTH_KHZ == 0


def merge_by_name(bands: list[BandDefinition], widen: bool = False) -> BandDefinition | None:
    """Merge bands of one frequency class into a band without a number.

    Args:
        bands: Bands to merge
        widen: Span the channel range over all bands instead of keeping the
            range of the first one

    Returns:
        BandDefinition with number None, or None if the names differ
    """
    names = {band.name for band in bands}
    if len(names) != 1:
        return None

    channel_range = bands[0].channel_range
    if widen:
        channel_range = (min(band.low for band in bands), max(band.high for band in bands))
    return replace(bands[0], channel_range=channel_range, number=None)


def raster_tie_break(arfcn: int, tied: list[BandDefinition]) -> BandDefinition | None:
    """Pick among equally prioritised bands using the channel raster.

    Falls back to a number-less band when all remaining bands share a name.
    """
    on_raster = [band for band in tied if is_on_raster(arfcn, band)]

    if len(on_raster) == 1:
        return on_raster[0]
    if on_raster:
        # Real networks do hit this; the frequency class is still right
        return merge_by_name(on_raster)
    return merge_by_name(tied, widen=True)


def match(arfcn: int, band_hints: Iterable[int] = (), table: tuple[BandDefinition, ...] = BANDS_NR) -> BandDefinition | None:
    """Find the band definition that best describes arfcn.

    Args:
        arfcn: NR-ARFCN
        band_hints: Band numbers the caller already knows are acceptable
        table: Band table to search

    Returns:
        A table entry, a merged entry with number None, or None when no band
        fits or the candidates cannot be told apart
    """
    candidates = filter_by_hints(bands_for_arfcn(arfcn, table), band_hints)

    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    best = highest_unique_priority(candidates)
    if best is not None:
        return best

    return raster_tie_break(arfcn, top_priority(candidates))


def resolve(arfcn: int, band_hints: Iterable[int] = ()) -> ResolvedBand:
    """Resolve an NR-ARFCN into band information.

    If no band is found, the result carries only the channel number and
    downlink frequency.

    Args:
        arfcn: NR-ARFCN reported by the modem
        band_hints: Optional band numbers to restrict the search to

    Returns:
        ResolvedBand

    Raises:
        TypeError: arfcn is not an integer
        ValueError: arfcn is negative
    """
    if isinstance(arfcn, bool) or not isinstance(arfcn, int):
        raise TypeError(f"ARFCN must be an integer, got {type(arfcn).__name__}")
    if arfcn < 0:
        raise ValueError(f"ARFCN must be non-negative, got {arfcn}")

    band = match(arfcn, band_hints)
    return ResolvedBand(
        channel_number=arfcn,
        frequency_khz=arfcn_to_freq(arfcn),
        number=band.number if band else None,
        name=band.name if band else None,
    )
