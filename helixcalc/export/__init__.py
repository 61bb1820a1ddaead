"""
Export of calculation results for external drafting tools.
"""

from helixcalc.export.dat import generate_dat_files, write_dat_files

__all__ = ["generate_dat_files", "write_dat_files"]
