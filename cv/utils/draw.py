import cv2
import numpy as np

def scan_region(frame, scale=0.6):
    """Centred square the user is asked to align the code in: [x1,y1,x2,y2]."""
    h, w = frame.shape[:2]
    side = int(min(h, w) * scale)
    x1, y1 = (w - side) // 2, (h - side) // 2
    return [x1, y1, x1 + side, y1 + side]

def draw_scan_region(frame, scale=0.6, color=(255, 255, 255), thickness=2):
    x1, y1, x2, y2 = scan_region(frame, scale)
    cv2.rectangle(frame, (x1, y1), (x2, y2), color, thickness)
    cv2.putText(frame, "Align QR inside frame", (x1, max(0, y1 - 12)),
                cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2, cv2.LINE_AA)

def draw_code_outline(frame, points, color=(0, 255, 0), thickness=3):
    if points is None:
        return
    pts = np.asarray(points, dtype=np.int32).reshape(-1, 1, 2)
    if len(pts) < 3:
        return
    cv2.polylines(frame, [pts], True, color, thickness, cv2.LINE_AA)
