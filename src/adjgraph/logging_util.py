import logging
import time
from contextlib import contextmanager

from tqdm import tqdm

logger = logging.getLogger(__name__)

global_phase_stack = [0] * 100  # Fixed maximum depth
global_phase_level = 0


@contextmanager
def push_to_phase_id_stack():
    global global_phase_stack
    global global_phase_level
    global_phase_stack[global_phase_level] += 1
    global_phase_level += 1
    phase_stack_string = ".".join(
        [str(i) for i in global_phase_stack[:global_phase_level]]
    )
    try:
        yield phase_stack_string
    finally:
        # Child phases restart their numbering under the next sibling.
        global_phase_stack[global_phase_level] = 0
        global_phase_level -= 1


@contextmanager
def _phase(name, level, done_label):
    start_time = time.time()
    with push_to_phase_id_stack() as phase_id:
        logger.log(level, f"({phase_id}) {name}")
        yield phase_id
        delta_time_rounded = round(time.time() - start_time)
        logger.log(level, f"({phase_id}) {name} ({done_label}{delta_time_rounded} sec)")


def phase_info(name):
    return _phase(name, logging.INFO, "DONE ")


def phase_debug(name):
    return _phase(name, logging.DEBUG, "")


def tqdm_info(*args, **kwargs):
    return tqdm(*args, disable=(not logger.isEnabledFor(logging.INFO)), **kwargs)


def tqdm_debug(*args, **kwargs):
    return tqdm(*args, disable=(not logger.isEnabledFor(logging.DEBUG)), **kwargs)
