"""Plotting utilities for ID3 analysis results."""

from .gain_plots import plot_information_gains


__all__ = ["plot_information_gains"]
