import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def write_trial(tmp_path):
    """Write integer triplets as a tab separated trial file in tmp_path."""
    def _write(name, rows, sep="\t"):
        path = tmp_path / name
        path.write_text("".join(sep.join(str(v) for v in row) + "\n" for row in rows))
        return str(path)
    return _write
