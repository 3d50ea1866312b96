import cv2
import cvzone

FACE_SIZE = (200, 200)
BOX_COLOR = (255, 0, 0)

DEFAULT_CASCADE_PATH = cv2.data.haarcascades + "haarcascade_frontalface_default.xml"


class HaarFaceDetector:
    """Haar cascade wrapper. `detect` takes a grayscale image and returns (x, y, w, h) boxes."""

    def __init__(self, model_path=DEFAULT_CASCADE_PATH):
        self.model_path = model_path
        self.cascade = cv2.CascadeClassifier()
        if not self.cascade.load(model_path):
            raise RuntimeError(f"Could not load face cascade from {model_path}")

    def detect(self, gray):
        return self.cascade.detectMultiScale(gray)


def detect_faces(frame, detector, state):
    """
    Run detection on one frame and replace the shared buffer with the results.

    Every detected region is outlined on `frame`; only the first
    `state.max_faces` are cropped, resized and buffered (detector order, no
    re-ranking). The caller must hold `state.lock`.
    """
    gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
    regions = [tuple(int(v) for v in r) for r in detector.detect(gray)]

    faces = []
    for i, (x, y, w, h) in enumerate(regions):
        cv2.rectangle(frame, (x, y), (x + w, y + h), BOX_COLOR, 2)
        if i >= state.max_faces:
            continue
        # Crop from the grayscale copy so the outline never ends up in the thumbnail
        face_roi = gray[y:y + h, x:x + w]
        if face_roi.size == 0:
            # Still counts towards max_faces; the detector returned a box outside the frame
            print(f"⚠️ Skipping empty face region {(x, y, w, h)}")
            continue
        faces.append(cv2.resize(face_roi, FACE_SIZE))
        # Corner marks on the faces that made it into the buffer
        cvzone.cornerRect(frame, bbox=(x, y, w, h), rt=0)

    state.faces = faces
    return faces
