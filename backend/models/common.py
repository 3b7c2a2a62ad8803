from enum import Enum

NOT_AVAILABLE = "N/A"
MASK_PREFIX = "XXXX XXXX "
MARKUP_PREFIX = "<?xml"
DATA_ELEMENT_TAG = "PrintLetterBarcodeData"

class PayloadFormat(str, Enum):
    structured_markup = "structured_markup"
    delimited = "delimited"
