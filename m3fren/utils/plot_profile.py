"""
Plotting entropy profiles

© 2023-2025 Infant Neuromotor Control Laboratory. All rights reserved.
"""
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt


def _finish(fig, show, savepath, default_name):
    if not show:
        outpath = savepath or default_name
        fig.savefig(outpath, dpi=600, format='tiff',
                    pil_kwargs={"compression": "tiff_lzw"})
    else:
        plt.show()


def plot_profile(profile, title=None, ylabel='Entropy', show=True,
                 savepath=None):
    """
    Plot entropy against scale.

    Parameters
    ----------
    profile : numpy.ndarray | pandas.Series | pandas.DataFrame
        A single profile (scale 1 first), or a DataFrame of
        channel x scale (output of channelwise) drawn one line per channel.
    title : str or None
        Optional title.
    ylabel : str
        Label of the y axis.
    show : bool
        Whether to display the figure.
    savepath : str or None
        Optional path to save the figure when show is False.

    Returns
    -------
    matplotlib.axes.Axes
    """
    fig, ax = plt.subplots(1)

    if isinstance(profile, pd.DataFrame):
        for ch, row in profile.iterrows():
            ax.plot(row.index, row.values, linewidth=1.5, label=f'Ch{ch + 1}')
        ax.legend()
    else:
        values = np.asarray(profile, dtype=float)
        scales = np.arange(1, values.shape[0] + 1)
        ax.plot(scales, values, 'k-', linewidth=2)

    ax.set_xlabel("Scale")
    ax.set_ylabel(ylabel)
    ax.set_title(title or "Entropy over scales")

    _finish(fig, show, savepath, 'EntropyProfile.tiff')
    return ax


def plot_channel_entropy(values, title=None, show=True, savepath=None):
    """
    Bar plot of one entropy value per channel (ex. mFreEn per channel).

    Parameters
    ----------
    values : list | numpy.ndarray | pandas.Series
    title, show, savepath
        Same as plot_profile.

    Returns
    -------
    matplotlib.axes.Axes
    """
    values = np.asarray(values, dtype=float)
    fig, ax = plt.subplots(1)
    ax.bar(np.arange(1, values.shape[0] + 1), values)
    ax.set_xlabel("Channel")
    ax.set_ylabel("Entropy value")
    ax.set_title(title or "mFreEn per channel")

    _finish(fig, show, savepath, 'ChannelEntropy.tiff')
    return ax
