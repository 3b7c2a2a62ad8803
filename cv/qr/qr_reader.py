import cv2

from backend.services.payload_parser import parse

class QRReader:
    """
    Uses OpenCV QRCodeDetector to decode identity QR codes from:
      - full frame
      - cropped ROI (the on-screen scan region)
      - image file on disk
    Returns:
      decoded_str, IdentityRecord (or None, None when nothing decoded)
    last_points is always in the coordinates of the frame passed in.
    """
    def __init__(self):
        self.detector = cv2.QRCodeDetector()
        self.last_points = None

    def decode_bgr(self, frame_bgr):
        data, points, _ = self.detector.detectAndDecode(frame_bgr)
        self.last_points = points
        # keep the text as decoded: surrounding whitespace can be a delimiter
        if data and data.strip():
            return data, parse(data)
        return None, None

    def decode_roi(self, frame_bgr, bbox, pad=12):
        """
        bbox: [x1,y1,x2,y2]
        pad: margin around bbox so the code's quiet zone survives the crop
        """
        h, w = frame_bgr.shape[:2]
        x1, y1, x2, y2 = bbox
        x1 = max(0, int(x1) - pad)
        y1 = max(0, int(y1) - pad)
        x2 = min(w, int(x2) + pad)
        y2 = min(h, int(y2) + pad)

        if x2 <= x1 or y2 <= y1:
            self.last_points = None
            return None, None

        raw, record = self.decode_bgr(frame_bgr[y1:y2, x1:x2])
        if self.last_points is not None:
            self.last_points = self.last_points + (x1, y1)
        return raw, record

    def decode_file(self, path):
        frame = cv2.imread(str(path))
        if frame is None:
            return None, None
        return self.decode_bgr(frame)
