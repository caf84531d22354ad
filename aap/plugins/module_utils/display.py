try:
    from ansible.utils.display import Display as OrigDisplay
    HAS_DISPLAY = True
except ImportError:
    HAS_DISPLAY = False


class Display:
    """Thin wrapper around Ansible's Display so module_utils code can log at
    the usual verbosity levels, and stays importable without a controller.

    Messages are prefixed with the component name when one is given.
    """

    def __init__(self, name: str = None) -> None:
        self.display = OrigDisplay() if HAS_DISPLAY else None
        self.name = name

    def _format(self, msg) -> str:
        return f"[{self.name}] {msg}" if self.name else msg

    def info(self, msg, color=None, stderr=False):
        if self.display:
            self.display.display(self._format(msg), color=color, stderr=stderr)

    def warning(self, msg):
        if self.display:
            self.display.warning(self._format(msg))

    def v(self, msg, host=None):
        return self.verbose(msg, host=host, caplevel=0)

    def vv(self, msg, host=None):
        return self.verbose(msg, host=host, caplevel=1)

    def vvv(self, msg, host=None):
        return self.verbose(msg, host=host, caplevel=2)

    def vvvv(self, msg, host=None):
        return self.verbose(msg, host=host, caplevel=3)

    def debug(self, msg, host=None):
        if self.display:
            self.display.debug(self._format(msg), host)

    def verbose(self, msg, host=None, caplevel=2):
        if self.display:
            self.display.verbose(self._format(msg), host, caplevel)
