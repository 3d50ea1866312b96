import os

import numpy as np

from command_thread import PROMPT, CommandThread


def _scripted(lines):
    prompts = []
    pending = list(lines)

    def fake_input(prompt):
        prompts.append(prompt)
        if not pending:
            raise EOFError
        return pending.pop(0)

    return fake_input, prompts


def test_runs_commands_until_exit(state, capture_dir):
    state.faces = [np.zeros((200, 200), np.uint8)]
    fake_input, prompts = _scripted(["setmax 4", "capture", "exit", "clear"])

    thread = CommandThread(state, str(capture_dir), input_func=fake_input, idle_delay=0)
    thread.start()
    thread.join(5)

    assert not thread.is_alive()
    assert state.stopped()
    assert state.max_faces == 4
    # "clear" after "exit" is never read
    assert len(os.listdir(capture_dir)) == 1
    assert prompts == [PROMPT] * 3


def test_bad_input_does_not_end_loop(state, capture_dir):
    fake_input, prompts = _scripted(["setmax abc", "bogus", "setmax 2"])

    thread = CommandThread(state, str(capture_dir), input_func=fake_input, idle_delay=0)
    thread.start()
    thread.join(5)

    assert state.max_faces == 2
    assert len(prompts) == 4


def test_end_of_input_stops_everything(state, capture_dir):
    fake_input, _ = _scripted([])

    thread = CommandThread(state, str(capture_dir), input_func=fake_input, idle_delay=0)
    thread.start()
    thread.join(5)

    assert not thread.is_alive()
    assert state.stopped()


def test_observes_stop_before_prompting(state, capture_dir):
    fake_input, prompts = _scripted(["help"])
    state.request_stop()

    thread = CommandThread(state, str(capture_dir), input_func=fake_input, idle_delay=0)
    thread.start()
    thread.join(5)

    assert prompts == []
    assert thread.daemon
