import os
import time

import cv2

IMAGE_EXT = ".png"
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def list_regular_files(directory):
    """Regular files directly inside `directory` (no recursion)."""
    return [entry.path for entry in os.scandir(directory) if entry.is_file(follow_symlinks=False)]


def _free_path(directory, timestamp, index):
    # Two captures in the same second would otherwise reuse the same names
    while True:
        path = os.path.join(directory, f"face_{timestamp}_{index}{IMAGE_EXT}")
        if not os.path.exists(path):
            return path, index + 1
        index += 1


def save_face_images(faces, directory, now=None):
    """Write every face as face_<timestamp>_<index>.png. Returns the paths written."""
    timestamp = time.strftime(TIMESTAMP_FORMAT, time.localtime(now))
    written = []
    index = 0
    for face in faces:
        path, index = _free_path(directory, timestamp, index)
        if cv2.imwrite(path, face):
            written.append(path)
        else:
            print(f"❌ Could not write {path}")
    return written


def delete_regular_files(directory):
    """Remove every regular file in `directory`. Returns how many were removed."""
    removed = 0
    for path in list_regular_files(directory):
        try:
            os.remove(path)
            removed += 1
        except OSError as e:
            print(f"❌ Could not delete {path}: {e}")
    return removed


def rename_most_recent(directory, new_name):
    """
    Rename the most recently modified regular file to `<new_name><its extension>`.

    Returns the new path, or None when the directory holds no regular files.
    Raises FileExistsError instead of replacing another file, and OSError if
    the rename itself fails.
    """
    files = list_regular_files(directory)
    if not files:
        return None

    most_recent = max(files, key=os.path.getmtime)
    ext = os.path.splitext(most_recent)[1]
    new_path = os.path.join(os.path.dirname(most_recent), new_name + ext)
    if new_path == most_recent:
        return new_path
    if os.path.lexists(new_path):
        raise FileExistsError(f"{new_name + ext} already exists")
    os.rename(most_recent, new_path)
    return new_path
