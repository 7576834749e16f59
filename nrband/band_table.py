"""NR band table and ARFCN/frequency utilities.

Loads of NR-ARFCNs overlap. The table holds every band from 3GPP TS 38.101-1
(Release 16) that has a downlink defined.
"""

from dataclasses import dataclass

# Smallest legal channel bandwidth (kHz). Channels of a band sit on a raster
# with this spacing, anchored at the band's last ARFCN.
SMALLEST_BANDWIDTH_KHZ = 5_000

# ARFCN where the global frequency raster switches from 5 kHz to 15 kHz steps
RASTER_SWITCH_ARFCN = 600_000


@dataclass(frozen=True)
class BandDefinition:
    """One NR band as defined in 3GPP.

    channel_range is inclusive (low, high). name is the approximate
    frequency class ("2600", "3500", ...) and is shared by several bands.
    number is None only for merged results built by the resolver.
    """

    channel_range: tuple[int, int]
    name: str
    number: int | None
    priority: int = 0

    @property
    def low(self) -> int:
        return self.channel_range[0]

    @property
    def high(self) -> int:
        return self.channel_range[1]

    def contains(self, arfcn: int) -> bool:
        low, high = self.channel_range
        return low <= arfcn <= high


BANDS_NR = (
    BandDefinition((123_400, 130_400), "600", 71),
    BandDefinition((143_400, 145_600), "700", 29),
    BandDefinition((145_800, 149_200), "700", 12),
    BandDefinition((151_600, 160_600), "700", 28, 1),
    BandDefinition((151_600, 153_600), "700", 14),
    BandDefinition((158_200, 164_200), "800", 20, 1),
    BandDefinition((171_800, 178_800), "850", 26),
    BandDefinition((172_000, 175_000), "800", 18),
    BandDefinition((173_800, 178_800), "850", 5),
    BandDefinition((185_000, 192_000), "900", 8, 1),
    BandDefinition((285_400, 286_400), "1500", 51),
    BandDefinition((285_400, 286_400), "1500", 76),
    BandDefinition((285_400, 286_400), "1500", 93),
    BandDefinition((285_400, 286_400), "1500", 91),
    BandDefinition((286_400, 303_400), "1500", 50),
    BandDefinition((286_400, 303_400), "1500", 75),
    BandDefinition((286_400, 303_400), "1500", 92),
    BandDefinition((286_400, 303_400), "1500", 94),
    BandDefinition((295_000, 303_600), "1500", 74),
    BandDefinition((361_000, 376_000), "1800", 3, 1),
    BandDefinition((376_000, 384_000), "1900", 39),
    BandDefinition((386_000, 398_000), "1900", 2),
    BandDefinition((386_000, 399_000), "1900", 25),
    BandDefinition((399_000, 404_000), "2000", 70),
    BandDefinition((402_000, 405_000), "2000", 34),
    BandDefinition((422_000, 440_000), "2100", 66),
    BandDefinition((422_000, 434_000), "2100", 1, 1),
    BandDefinition((422_000, 440_000), "2100", 65),
    BandDefinition((460_000, 480_000), "2300", 40),
    BandDefinition((470_000, 472_000), "2300", 30),
    BandDefinition((496_700, 499_000), "2500", 53),
    BandDefinition((499_200, 537_999), "2600", 41),
    BandDefinition((499_200, 538_000), "2600", 90),
    BandDefinition((514_000, 524_000), "2600", 38),
    BandDefinition((524_000, 538_000), "2600", 7),
    BandDefinition((620_000, 680_000), "3700", 77),
    BandDefinition((620_000, 653_333), "3500", 78, 1),
    BandDefinition((636_667, 646_666), "3600", 48),
    BandDefinition((693_334, 733_333), "4500", 79),
)


def arfcn_to_freq(arfcn: int) -> int:
    """Convert NR-ARFCN to downlink frequency.

    3GPP TS 38.101-1, 5.4.2.1 NR-ARFCN and channel raster.

    Args:
        arfcn: NR-ARFCN (non-negative)

    Returns:
        Frequency in kHz
    """
    if arfcn <= RASTER_SWITCH_ARFCN:
        return 5 * arfcn
    return 3_000_000 + 15 * (arfcn - RASTER_SWITCH_ARFCN)


def bands_for_arfcn(arfcn: int, table: tuple[BandDefinition, ...] = BANDS_NR) -> list[BandDefinition]:
    """Return every band whose channel range contains arfcn, in table order."""
    return [band for band in table if band.contains(arfcn)]


def find_band(number: int, table: tuple[BandDefinition, ...] = BANDS_NR) -> BandDefinition | None:
    """Look up a band by its 3GPP number.

    Args:
        number: 3GPP band number (e.g. 78 for n78)
        table: Band table to search

    Returns:
        The first matching BandDefinition, or None if no band has that number
    """
    for band in table:
        if band.number == number:
            return band
    return None
