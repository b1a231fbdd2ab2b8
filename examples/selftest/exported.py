"""Case exposed through a ``default`` export."""
from types import SimpleNamespace


def _run(config) -> None:
    assert config is not None


default = SimpleNamespace(
    description="Case bundled in a default export",
    run=_run,
    skip=lambda: False,
    resources=["browser"],
)
