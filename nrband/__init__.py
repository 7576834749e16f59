"""NR band resolver - map 5G NR-ARFCNs to 3GPP bands."""

from .band_table import BANDS_NR, SMALLEST_BANDWIDTH_KHZ, BandDefinition, arfcn_to_freq, bands_for_arfcn, find_band
from .resolver import ResolvedBand, match, resolve
from .config import load_config, save_config

__all__ = [
    # Band table
    'BANDS_NR',
    'SMALLEST_BANDWIDTH_KHZ',
    'BandDefinition',
    'arfcn_to_freq',
    'bands_for_arfcn',
    'find_band',
    # Resolver
    'ResolvedBand',
    'match',
    'resolve',
    # Config
    'load_config',
    'save_config',
]
