import argparse
import logging

import cv2
import yaml

from backend.core.config import settings
from backend.core.logging import setup_logging
from backend.services.presenter import present
from cv.qr.qr_reader import QRReader
from cv.scanner import ScanSession
from cv.utils.draw import draw_code_outline, draw_scan_region, scan_region
from cv.utils.throttle import ScanThrottle

logger = logging.getLogger(__name__)

WINDOW = "Identity QR Scanner"


def load_yaml(path):
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def camera_frames(cap):
    while True:
        ok, frame = cap.read()
        if not ok:
            logger.warning("Failed to read from camera.")
            return
        yield frame


def print_result(record):
    view = present(record)
    print("\n Scanned Data")
    for line in view["fields"]:
        print(" ", line)
    if view["warning"]:
        print(" Warning: could not fully parse QR:", view["warning"])
    print("\n Raw QR Data:")
    print(view["raw"])


def scan_image(path):
    raw, record = QRReader().decode_file(path)
    if not raw:
        raise SystemExit(f"No QR code found in {path}")
    print_result(record)


def scan_camera(cfg):
    cam_cfg = cfg["camera"]
    scan_cfg = cfg.get("scan", {}) or {}
    overlay_cfg = cfg.get("overlay", {}) or {}

    cap = cv2.VideoCapture(int(cam_cfg["index"]))
    if not cap.isOpened():
        raise RuntimeError("Cannot open camera.")
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, int(cam_cfg["width"]))
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, int(cam_cfg["height"]))

    reader = QRReader()

    def show(frame):
        annotated = frame.copy()
        if overlay_cfg.get("highlight_scan_region", True):
            draw_scan_region(annotated)
        if overlay_cfg.get("highlight_code_outline", True):
            draw_code_outline(annotated, reader.last_points)
        cv2.imshow(WINDOW, annotated)
        return (cv2.waitKey(1) & 0xFF) != ord("q")

    session = ScanSession(
        reader,
        throttle=ScanThrottle(max_per_second=float(scan_cfg.get("max_scans_per_second", 5))),
        on_frame=show,
        region=scan_region if overlay_cfg.get("highlight_scan_region", True) else None,
        pad=int(scan_cfg.get("roi_pad_px", 12)),
    )

    print("Show an identity QR to the camera. Press q to quit.")
    try:
        result = session.run(camera_frames(cap))
    finally:
        cap.release()
        cv2.destroyAllWindows()

    if result is None:
        print("No QR scanned.")
        return
    print_result(result.record)


def main():
    ap = argparse.ArgumentParser(description="Scan an identity QR from the camera or an image file")
    ap.add_argument("--image", help="Decode a static image instead of opening the camera")
    ap.add_argument("--config", default=settings.scanner_config_path)
    args = ap.parse_args()

    setup_logging()
    if args.image:
        scan_image(args.image)
    else:
        scan_camera(load_yaml(args.config))


if __name__ == "__main__":
    main()
