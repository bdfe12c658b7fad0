# stompbox

Block-based audio effects in the style of a guitar pedal, plus a few
command-line tools for working with mono 16-bit WAV files at 48 kHz.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Effects

Every effect is a `Patch` (from `stompbox.filters.basic`). Its
`process(samples, knobs)` method takes one block of samples and returns a
float32 NumPy array of the same length. Knob positions come from a `Knobs`
object; `stompbox.knobs.DummyKnobs` reports the same value for every knob,
1.0 (fully up) unless given another `value`.

```python
from stompbox.knobs import DummyKnobs
from stompbox.filters.basic import Gain, LowPassFilter
from stompbox.filters.routing import Seq

knobs = DummyKnobs()
chain = Seq(48, LowPassFilter(), Gain(0.5))
block = [0.0] * 48
out = chain.process(block, knobs)
```

Available effects:

- `stompbox.filters.basic`: `PassThruFilter`, `Gain(gain)`, `LowPassFilter`,
  `HighPassFilter`, `KnobGain(knob_id, low, high)`, and `Delay`, which
  delays its input by 48 samples starting from silence
- `stompbox.filters.dynamics`: `EnvelopeFollower`, `Fuzz`, `WaveShaper`
  (which also records the smallest and largest input it has seen in `min`
  and `max`)
- `stompbox.filters.reso`: `ResoFilter(freq_knob_id, q_knob_id)`, a
  resonant filter whose cutoff and resonance are read from two knobs once per
  block
- `stompbox.filters.routing`: `Seq(block_size, patch0, patch1)` runs two
  patches in series; `Mixer` with `MixerChannel(gain, patch)` runs patches in
  parallel and sums them, rescaling the faders so they add up to the number of
  channels (gains summing to zero raise `ValueError`); `Interp(block_size,
  patch0, patch1, interp_knob_id)` crossfades between two patches with a knob.
  Blocks longer than the given block size (48 for `Mixer`) raise `ValueError`.
- `stompbox.filters.harmoneer`: `Harmoneer(ratio)`, a delay-line pitch
  shifter; a ratio of exactly 1.0 raises `ValueError`
- `stompbox.much_harm.much_harm()` builds a ready-made harmoniser `Mixer`:
  an octave down on knob 0, an octave up on knob 1 and a fifth up on knob 2,
  mixed with the dry signal

## Analysis helpers

- `stompbox.fft`: `RealFFT(size=2048).run(samples)` and `rfft_packed` give a
  real FFT packed into an array of the input's length (DC and Nyquist first,
  then interleaved real/imaginary parts); `fft_to_magnitudes` turns that into
  magnitudes, and `quake_rsqrt` is the fast inverse square root it uses
- `stompbox.frequency_matcher.match_values(old, nu)` pairs up two sorted
  lists of frequencies and returns a list of `Match`, `DropOld` and `AddNew`
  results; values more than 120 Hz apart are never matched
- `stompbox.sine_table`: `table_sin(x)`, a 256-entry interpolated sine table,
  and `generate_sine_table(table_size)`
- `stompbox.wavfile`: `file_read` and `file_write` for mono 16-bit WAV files
- `stompbox.samples`: the sample rate, block and FFT sizes, and
  `sample_i16_to_f32` / `sample_f32_to_i16`
- `stompbox.tools`: `rms_difference(samples0, samples1)` and
  `generate_sines(duration, pairs)`
- `stompbox.graphing`: `graph_2d_fun` and `graph_3d_line_fun` draw a
  function or a parametric curve to an image file with matplotlib

Small utilities: `stompbox.circbuf.CircBuf`, `stompbox.inertial.Inertial`
(a value that slews toward a target), `stompbox.minmax.MinMax`,
`stompbox.maxes.Maxes` (high-water marks keyed by `Item`),
`stompbox.globby.Globby` (a lock-protected optional value) and
`stompbox.bench.benchmark(duration, code)`.

## Commands

    stompbox-sine out.wav 2.0 440 0.5 660 0.25   # duration, then freq/amp pairs
    stompbox-fft in.wav out.wav                   # first 2048 samples, scaled FFT
    stompbox-compare a.wav b.wav                  # prints the RMS difference
    stompbox-diff a.wav b.wav diff.wav            # sample-by-sample difference
    stompbox-dump in.wav                          # prints "index: value" lines
    stompbox-sine-table                           # prints the sine lookup table
    stompbox-graph                                # writes out2d.png, out3d.svg, waveshaper.png

## What it does not do

There is no live audio input or output: effects work on blocks of samples
in memory. There is also no command that runs an effect over a WAV file;
to do that, read the file with `file_read`, feed it to a patch block by
block, and write the result with `file_write`.