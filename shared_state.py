"""
Lock-guarded state shared between the capture loop (`main.py`) and the
command thread (`command_thread.py`).

One instance is created by the orchestrator and handed to both loops.
Every read or write of `faces`, `max_faces` or `show_request` must hold `lock`.
"""
import threading
from typing import List, Optional

import numpy as np


class SharedState:
    def __init__(self, max_faces: int = 1):
        self.lock = threading.Lock()
        # Cropped 200x200 grayscale faces from the most recent frame only
        self.faces: List[np.ndarray] = []
        # Upper bound on len(faces); changed only through the `setmax` command
        self.max_faces = max_faces
        # Faces queued by `show`; the capture loop displays them on the main thread
        self.show_request: Optional[List[np.ndarray]] = None
        # Set by either loop to stop the other
        self.stop_event = threading.Event()

    def request_stop(self):
        self.stop_event.set()

    def stopped(self) -> bool:
        return self.stop_event.is_set()
