"""Running shell commands and starting the game controller driver."""

import subprocess
import time

from hexapode.config import (
    BLUETOOTH_SCAN_COMMAND,
    DS4_DRIVER_LAUNCH_COMMAND,
    DS4_MAC_ADDR,
    PID_FILENAME,
)

_MAC_OFFSET = 20
_MAC_LENGTH = 17
_DRIVER_START_DELAY = 2


def run_command(cmd):
    """Run a shell command and return its standard output, or "ERROR"."""
    try:
        completed = subprocess.run(cmd, shell=True, stdout=subprocess.PIPE, text=True)
    except OSError:
        return "ERROR"
    return completed.stdout


def launch_ds4drv(pid_filename=PID_FILENAME, command=DS4_DRIVER_LAUNCH_COMMAND):
    """Start the controller driver unless its pid file exists.

    Returns True when the driver was started.
    """
    print("Check if ds4drv is launched")
    try:
        with open(pid_filename, "r+"):
            pass
    except OSError:
        print("Launch ds4drv")
        subprocess.run(command, shell=True)
        time.sleep(_DRIVER_START_DELAY)
        return True
    print("Ds4drv already launched")
    return False


def wait_for_controller(mac_address=DS4_MAC_ADDR, scan_command=BLUETOOTH_SCAN_COMMAND,
                        interval=2):
    """Block until the scan command lists the controller's address."""
    print(f"Wait for DS4 controller {mac_address} connexion")
    found = ""
    while found != mac_address:
        found = run_command(scan_command)[_MAC_OFFSET:_MAC_OFFSET + _MAC_LENGTH]
        time.sleep(interval)
    print(f"The DS4 controller {mac_address} is connected")