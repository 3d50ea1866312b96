import cv2

LIVE_WINDOW = "Face Detection"
FACE_WINDOW = "Captured Face"
ESC_KEY = 27


class OpenCVDisplay:
    """Thin adapter over the highgui calls so the loops can run against a fake."""

    def show(self, title, image):
        cv2.imshow(title, image)

    def wait_key(self, delay):
        return cv2.waitKey(delay) & 0xFF

    def close(self, title=None):
        if title is None:
            cv2.destroyAllWindows()
        else:
            cv2.destroyWindow(title)
