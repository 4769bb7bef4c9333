import os

import numpy as np

from accprep import viz
from accprep.viz import NullSink, PlotSink, export_report_to_pdf


def test_null_sink_accepts_anything():
    assert NullSink().emit("title", {"x": np.ones(3)}, ylim=1.0) is None


def test_plot_sink_saves_numbered_pngs(tmp_path):
    sink = PlotSink(str(tmp_path / "plots"), prefix="run")

    sink.emit("Trial 1 - Noisy accelerations", {"x": np.ones(5), "y": np.zeros(5), "z": -np.ones(5)}, ylim=19.6)
    sink.emit("Noisy modeling dataset", {"x": np.ones((5, 2)), "y": np.ones((5, 2)), "z": np.ones((5, 2))})

    names = [os.path.basename(p) for p in sink.saved]
    assert names == ["run_000_trial_1_noisy_accelerations.png", "run_001_noisy_modeling_dataset.png"]
    assert all(os.path.isfile(p) for p in sink.saved)


def test_plot_sink_overlay(tmp_path):
    sink = PlotSink(str(tmp_path), prefix="run")
    freqs = np.linspace(0, 16, 8)

    sink.emit(
        "Power spectra",
        {"NO filtering": np.ones((8, 2)), "filter n = 3": np.zeros((8, 2))},
        xvalues=freqs,
        overlay=True,
        xlabel="frequency [Hz]",
    )

    assert len(sink.saved) == 1
    assert os.path.isfile(sink.saved[0])


def test_export_report_to_pdf(tmp_path):
    sink = PlotSink(str(tmp_path), prefix="run")
    sink.emit("one", {"x": np.arange(4.0)})
    sink.emit("two", {"x": np.arange(4.0)})

    pdf = export_report_to_pdf(str(tmp_path), "run")

    assert pdf == os.path.join(str(tmp_path), "run_report.pdf")
    assert os.path.getsize(pdf) > 0


def test_export_report_uses_given_plots_only(tmp_path, monkeypatch):
    old = PlotSink(str(tmp_path), prefix="run")
    old.emit("stale", {"x": np.arange(4.0)})
    old.emit("stale two", {"x": np.arange(4.0)})
    sink = PlotSink(str(tmp_path), prefix="run")
    sink.emit("fresh", {"x": np.arange(4.0)})

    read = []
    real_imread = viz.plt.imread
    monkeypatch.setattr(viz.plt, "imread", lambda p: read.append(p) or real_imread(p))

    pdf = export_report_to_pdf(str(tmp_path), "run", png_files=sink.saved)

    assert os.path.isfile(pdf)
    assert read == sink.saved


def test_export_report_without_plots(tmp_path, capsys):
    assert export_report_to_pdf(str(tmp_path), "run") is None
    assert "No plot PNGs" in capsys.readouterr().out
