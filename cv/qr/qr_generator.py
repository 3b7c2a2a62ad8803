import os
from xml.sax.saxutils import quoteattr

import qrcode

from backend.models.common import DATA_ELEMENT_TAG

def prompt(msg: str, default: str = "") -> str:
    s = input(f"{msg}{' ['+default+']' if default else ''}: ").strip()
    return s if s else default

def build_markup_payload(attrs: dict) -> str:
    """
    Printed-letter style payload: one element, identity fields as attributes.
    Empty values are left out so alias/default handling can be exercised.
    """
    parts = [f"{k}={quoteattr(str(v))}" for k, v in attrs.items() if v]
    body = " ".join(parts)
    return f'<?xml version="1.0" encoding="UTF-8"?><{DATA_ELEMENT_TAG} {body}/>'

def build_delimited_payload(fields, delimiter: str = "|") -> str:
    return delimiter.join(fields)

def make_qr_image(data_str: str, box_size: int = 10, border: int = 4):
    qr = qrcode.QRCode(box_size=box_size, border=border)
    qr.add_data(data_str)
    qr.make(fit=True)
    return qr.make_image()

def build_payload():
    kind = prompt("Format (xml|delimited)", "xml")
    if kind == "delimited":
        fields = [
            prompt("Reference ID", "REF123"),
            prompt("Name", ""),
            prompt("Date of birth", ""),
            prompt("Gender", ""),
            prompt("Address", ""),
        ]
        return build_delimited_payload(fields, prompt("Delimiter", "|"))

    attrs = {
        "uid": prompt("UID", ""),
        "name": prompt("Name", ""),
        "gender": prompt("Gender (M|F|T)", ""),
        "dob": prompt("Date of birth (DD/MM/YYYY)", ""),
        "co": prompt("Care of", ""),
        "house": prompt("House", ""),
        "street": prompt("Street", ""),
        "vtc": prompt("Village/Town/City", ""),
        "dist": prompt("District", ""),
        "state": prompt("State", ""),
        "pc": prompt("Pincode", ""),
    }
    return build_markup_payload(attrs)


def main():
    out_dir = prompt("Output folder", "qr_codes")
    os.makedirs(out_dir, exist_ok=True)

    data_str = build_payload()
    img = make_qr_image(data_str)

    fname = prompt("File name", "identity_qr.png").replace("/", "_")
    path = os.path.join(out_dir, fname)
    img.save(path)

    print("\n QR created:")
    print("File:", path)
    print("Encoded payload:", data_str)

if __name__ == "__main__":
    main()
