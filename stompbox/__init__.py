"""Block-based audio effects, FFT helpers, WAV tools and plotting."""

__version__ = "0.1.0"