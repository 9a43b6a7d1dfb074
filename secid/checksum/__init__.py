"""secid.checksum — check-digit calculators for ISIN, CUSIP, SEDOL and FIGI."""

from secid.checksum.cusip import cusip_check_digit as cusip_check_digit
from secid.checksum.figi import figi_check_digit as figi_check_digit
from secid.checksum.isin import isin_check_digit as isin_check_digit
from secid.checksum.sedol import sedol_check_digit as sedol_check_digit
