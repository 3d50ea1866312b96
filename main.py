import os
import sys

import cv2

from command_thread import CommandThread
from commands import view_faces
from display import OpenCVDisplay, LIVE_WINDOW, ESC_KEY
from face_detector import HaarFaceDetector, DEFAULT_CASCADE_PATH, detect_faces
from shared_state import SharedState

# Global Configuration
CAMERA_INDEX = int(os.environ.get('FACE_CAMERA_INDEX', '0'))
CASCADE_PATH = os.environ.get('FACE_CASCADE_PATH', DEFAULT_CASCADE_PATH)
CAPTURE_DIR = os.environ.get('FACE_CAPTURE_DIR', 'images')
MAX_FACES = int(os.environ.get('FACE_MAX_FACES', '1'))
INPUT_DELAY = float(os.environ.get('FACE_INPUT_DELAY', '1.0'))  # seconds between prompts
JOIN_TIMEOUT = float(os.environ.get('FACE_JOIN_TIMEOUT', '2.0'))
KEY_POLL_MS = 10


def run_capture_loop(cap, detector, state, display):
    """Pull frames until the stream ends, ESC is pressed, or a stop is requested."""
    frame_count = 0
    while not state.stopped():
        success, frame = cap.read()
        if not success or frame is None:
            print("⚠️ Camera stream ended.")
            break

        frame_count += 1
        with state.lock:
            state.faces = []
            detect_faces(frame, detector, state)
            if state.show_request:
                # highgui windows must be driven from the main thread
                faces, state.show_request = state.show_request, None
                view_faces(faces, display)

        display.show(LIVE_WINDOW, frame)
        if display.wait_key(KEY_POLL_MS) == ESC_KEY:
            print("🛑 ESC pressed")
            break

    state.request_stop()
    return frame_count


def run(cap, detector, state, display, directory=CAPTURE_DIR, input_func=input,
        input_delay=INPUT_DELAY, join_timeout=JOIN_TIMEOUT) -> int:
    command_thread = CommandThread(state, directory, input_func=input_func, idle_delay=input_delay)
    command_thread.start()

    print("Starting capture loop...")
    try:
        run_capture_loop(cap, detector, state, display)
    except KeyboardInterrupt:
        print("Stopping...")
    finally:
        command_thread.stop()
        # A console read may still be blocked; the thread is a daemon so we don't wait forever
        command_thread.join(join_timeout)
        if command_thread.is_alive():
            print("⚠️ Command thread still waiting for input, leaving it behind.")
        cap.release()
        display.close()
    return 0


def main() -> int:
    print("Loading face cascade...")
    try:
        detector = HaarFaceDetector(CASCADE_PATH)
    except RuntimeError as e:
        print(f"❌ Error loading face cascade: {e}")
        return -1

    cap = cv2.VideoCapture(CAMERA_INDEX)
    if not cap.isOpened():
        print(f"❌ Error opening video capture (camera {CAMERA_INDEX})")
        return -1

    if not os.path.isdir(CAPTURE_DIR):
        print(f"⚠️ Warning: capture directory '{CAPTURE_DIR}' does not exist. Create it before using 'capture'.")

    state = SharedState(max_faces=MAX_FACES)
    return run(cap, detector, state, OpenCVDisplay(), directory=CAPTURE_DIR,
               input_delay=INPUT_DELAY, join_timeout=JOIN_TIMEOUT)


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
