import threading
import time

from commands import handle_command

PROMPT = "Enter command: "


class CommandThread(threading.Thread):
    def __init__(self, state, directory, input_func=input, idle_delay=1.0):
        threading.Thread.__init__(self)
        self.daemon = True
        self.state = state
        self.directory = directory
        self.input_func = input_func
        self.idle_delay = idle_delay

    def run(self) -> None:
        print("\n" + "=" * 50)
        print("⌨️  COMMANDS READY (type 'help')")
        print("=" * 50 + "\n")

        while not self.state.stopped():
            time.sleep(self.idle_delay)
            # The capture loop may have stopped while we slept
            if self.state.stopped():
                break
            try:
                line = self.input_func(PROMPT)
            except EOFError:
                print("\n🛑 Input closed, stopping")
                self.state.request_stop()
                break

            if not handle_command(line, self.state, self.directory):
                break

    def stop(self):
        self.state.request_stop()
