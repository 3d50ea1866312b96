import os

from face_store import save_face_images, delete_regular_files, rename_most_recent
from display import FACE_WINDOW

SETMAX_PREFIX = "setmax "
RENAME_PREFIX = "rename "
UNKNOWN_COMMAND = "Unknown command. Type 'help' for a list of available commands."

HELP_ROWS = [
    ("capture", "Manually capture detected faces"),
    ("clear", "Clear captured faces"),
    ("show", "Show captured faces"),
    ("setmax <number>", "Set max number of faces to detect"),
    ("rename <name>", "Rename the most recent capture"),
    ("exit", "Exit the program"),
]


# --- HANDLERS ---
# Each one expects the caller to hold state.lock

def capture_faces(state, directory):
    if not state.faces:
        print("No faces to capture.")
        return []
    written = save_face_images(state.faces, directory)
    if written:
        print(f"✅ Captured faces saved to {directory}")
    return written


def clear_faces(state, directory):
    try:
        delete_regular_files(directory)
    except OSError as e:
        print(f"❌ Could not clear {directory}: {e}")
        return
    state.faces = []
    print("Captured faces cleared.")


def show_faces(state):
    """Queue the buffered faces for the viewer. The capture loop shows them on the main thread."""
    if not state.faces:
        print("No faces to show.")
        return False
    state.show_request = list(state.faces)
    print(f"Showing {len(state.faces)} face(s), press any key in the viewer to advance.")
    return True


def view_faces(faces, display):
    """Show each face in turn, advancing on any key press. Main thread only."""
    for face in faces:
        display.show(FACE_WINDOW, face)
        display.wait_key(0)
    display.close(FACE_WINDOW)


def set_max_faces(state, text):
    try:
        value = int(text.strip())
    except ValueError:
        print(f"❌ Invalid number: '{text}'")
        return False
    if value < 0:
        print(f"❌ Maximum number of faces cannot be negative: {value}")
        return False
    state.max_faces = value
    print(f"Maximum number of faces to detect set to {value}")
    return True


def rename_latest(directory, new_name):
    new_name = new_name.strip()
    if not new_name:
        print("❌ No name given.")
        return None
    # The new name must stay a plain file name inside the capture directory
    if new_name in (".", "..") or os.path.basename(new_name) != new_name or (
            os.altsep and os.altsep in new_name):
        print(f"❌ Invalid name '{new_name}': path separators are not allowed.")
        return None
    try:
        new_path = rename_most_recent(directory, new_name)
    except FileExistsError as e:
        print(f"❌ {e}")
        return None
    except OSError as e:
        print(f"❌ Rename failed: {e}")
        return None
    if new_path is None:
        print("No files found in the directory.")
    else:
        print(f"File renamed to: {new_path}")
    return new_path


def print_help():
    line_length = 30 * 2 + 4
    print("-" * line_length)
    print(f"{'Command':<30}| Description")
    print("-" * line_length)
    for command, description in HELP_ROWS:
        print(f"{command:<30}| {description}")
    print("-" * line_length)


# --- DISPATCH ---

def handle_command(line, state, directory):
    """Run one command line. Returns False once the operator asked to exit."""
    command = line.rstrip("\r\n")

    if command == "capture":
        with state.lock:
            capture_faces(state, directory)
    elif command == "clear":
        with state.lock:
            clear_faces(state, directory)
    elif command == "show":
        with state.lock:
            show_faces(state)
    elif command.startswith(SETMAX_PREFIX):
        with state.lock:
            set_max_faces(state, command[len(SETMAX_PREFIX):])
    elif command.startswith(RENAME_PREFIX):
        with state.lock:
            rename_latest(directory, command[len(RENAME_PREFIX):])
    elif command == "exit":
        state.request_stop()
        return False
    elif command == "help":
        print_help()
    else:
        print(UNKNOWN_COMMAND)
    return True
