# main libraries
import os
import re
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from typing import Dict, List, Optional
from glob import glob


# ---------------------------
# Diagnostics Sinks
# ---------------------------

class NullSink:
    """Diagnostics sink that discards everything it receives."""

    def emit(self, title: str, series: Dict[str, np.ndarray], **kwargs) -> None:
        pass


class PlotSink:
    """
    Diagnostics sink drawing every emitted set of signals with matplotlib.

    Each call to :meth:`emit` produces one PNG in ``outdir``. File names are
    numbered in emission order so a report keeps the processing order.

    Parameters
    ----------
    outdir : str
        Directory where the PNG files are written (created if missing).
    prefix : str
        Prefix of every file name, used to gather the files of one run.
    """

    def __init__(self, outdir: str, prefix: str = "accprep"):
        self.outdir = outdir
        self.prefix = prefix
        self.saved = []
        os.makedirs(outdir, exist_ok=True)

    def emit(
        self,
        title: str,
        series: Dict[str, np.ndarray],
        xvalues: Optional[np.ndarray] = None,
        ylim: Optional[float] = None,
        overlay: bool = False,
        xlabel: str = "time [samples]",
        ylabel: str = "acceleration [m/s²]",
    ) -> None:
        """
        Plot labelled signals and save the figure.

        Parameters
        ----------
        title : str
            Figure title; also used to build the file name.
        series : dict
            Label -> 1-D signal or 2-D (samples, trials) matrix. 2-D inputs
            are drawn one line per column.
        xvalues : np.ndarray, optional
            Shared x coordinates. Defaults to sample numbers starting at 1.
        ylim : float, optional
            Symmetric y axis limit.
        overlay : bool
            Draw all series in one axes with a legend instead of one subplot
            per label.
        """
        labels = list(series)
        n_rows = 1 if overlay else len(labels)
        fig, axes = plt.subplots(n_rows, 1, figsize=(10, 3 * n_rows + 1), squeeze=False)
        axes = axes[:, 0]

        for i, label in enumerate(labels):
            data = np.asarray(series[label])
            x = xvalues if xvalues is not None else np.arange(1, data.shape[0] + 1)
            ax = axes[0] if overlay else axes[i]
            lines = ax.plot(x, data, '-', color=f"C{i}" if overlay else None)
            if overlay:
                lines[0].set_label(label)
            else:
                ax.set_title(f"{title} - {label} axis")
            if ylim is not None:
                ax.set_ylim(-ylim, ylim)
            ax.grid(True, linestyle='--', alpha=0.5)

        if overlay:
            axes[0].set_title(title)
            axes[0].legend()
        axes[len(axes) // 2].set_ylabel(ylabel)
        axes[-1].set_xlabel(xlabel)
        fig.tight_layout()

        slug = re.sub(r"[^A-Za-z0-9]+", "_", title).strip("_").lower()
        fname = os.path.join(self.outdir, f"{self.prefix}_{len(self.saved):03d}_{slug}.png")
        fig.savefig(fname)
        plt.close(fig)
        self.saved.append(fname)


# ---------------------------
# Exporting Functions
# ---------------------------

def export_report_to_pdf(
    outdir: str,
    prefix: str,
    pdf_name: Optional[str] = None,
    png_files: Optional[List[str]] = None,
) -> Optional[str]:
    """
    Exports all PNG plots of a run into a single PDF file.

    Parameters
    ----------
    outdir : str
        Directory containing the PNG plot files.
    prefix : str
        Prefix shared by the plot files of the run (see :class:`PlotSink`).
    pdf_name : str or None, optional
        Name of the output PDF file. If None, defaults to '{prefix}_report.pdf' in outdir.
    png_files : list of str or None, optional
        Plots to include, in order (e.g. :attr:`PlotSink.saved`). If None, every
        '{prefix}_*.png' in outdir is used, including files of earlier runs.

    Returns
    -------
    str or None
        Path of the PDF written, None when no plot was found.
    """
    if png_files is None:
        png_files = sorted(glob(os.path.join(outdir, f"{prefix}_*.png")))
    if not png_files:
        print(f"[WARN] No plot PNGs found for '{prefix}' in {outdir}")
        return None
    if pdf_name is None:
        pdf_name = os.path.join(outdir, f"{prefix}_report.pdf")
    with PdfPages(pdf_name) as pdf:
        for png in png_files:
            fig = plt.figure()
            img = plt.imread(png)
            plt.imshow(img)
            plt.axis('off')
            pdf.savefig(fig)
            plt.close(fig)
    return pdf_name
