# splmeter

A small sound level meter. It takes one-second blocks of samples at 48 kHz
and reports the equivalent continuous sound level of each block in three
frequency weightings:

- **dB(Z)**: flat, with the microphone's own calibration curve applied
- **dB(A)**: A-weighted
- **dB(C)**: C-weighted

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
splmeter --help
```

lists the options:

- `--calibration PATH`: the microphone calibration file
  (default `./calibration_data/calibration.txt`).
- `--input PATH`: raw little-endian 32-bit float mono samples at 48 kHz;
  `-` (the default) reads standard input.
- `--log-file PATH`: also append each block's levels to this log file.

The command cuts the input into blocks of 48,000 samples and prints one line
per block: a UTC timestamp followed by the Z-, A- and C-weighted levels. A
final block shorter than 48,000 samples is not measured; a message saying how
many samples it held is printed instead. The command exits with status 1 if
the calibration file cannot be read or parsed, or if the input file cannot be
opened, and with status 0 once the input is exhausted.

For example, to measure a recording already converted to raw float32 samples:

```
splmeter --calibration mic.txt --input recording.f32
```

## What it does not do

The package does not capture audio from a sound card or USB microphone. It
measures samples that something else has already recorded, read from a file
or from standard input.

## Calibration files

Measurement microphones are shipped with a calibration file. Its first line
carries the sensitivity factor, and every following line holds a frequency in
Hz and the response in dB, separated by whitespace:

```
"Sens Factor =-1.234dB, SERNO: 0000000"
10.0   -2.50
20.0   -1.10
1000.0  0.00
20000.0 0.80
```

Lines that do not hold exactly two fields are ignored. A header without a
`Sens Factor` field, an empty file, or a two-field line that is not two
numbers raises `CalibrationError`. Responses are stored as linear gains.

## Library use

```python
import numpy as np

from splmeter.calibration import parse_calibration_file
from splmeter.weightings import generate_weightings
from splmeter.dsp import process_raw_data

calibration = parse_calibration_file("calibration.txt")
weightings = generate_weightings(96_000, 48_000.0, calibration)

samples = np.zeros(48_000, dtype=np.float32)  # one second of audio
levels = process_raw_data(samples, weightings)
print(levels.z, levels.a, levels.c)
```

The building blocks are available on their own:

- `splmeter.calibration`: `parse_calibration_file`, `parse_calibration_lines`
  (the same parsing over any iterable of lines) and `extract_sensitivity`;
  malformed input raises `CalibrationError`, a subclass of `ValueError`.
- `splmeter.types`: `MicCalibrationData` (with `interpolate`, linear
  interpolation that extrapolates past both ends) and `Weightings`, holding
  the `a_weighting`, `c_weighting` and `cal_weighting` gain arrays.
- `splmeter.weightings`: `a_weighting_gains`, `c_weighting_gains`,
  `cal_weighting_gains` and `generate_weightings`. Each curve has
  `fft_size // 2` bins; the A and C curves need an `fft_size` of at least 4.
- `splmeter.dsp`: `to_freq_domain`, `to_time_domain`, `apply_weighting`,
  `apply_hamming_window`, `calculate_leq` and `process_raw_data`, which raises
  `TooFewSamplesError` unless it is given exactly 48,000 samples and returns
  `SoundLevels` with fields `z`, `a` and `c`.
- `splmeter.ringbuffer`: `SampleRing`, a thread-safe bounded sample buffer
  that drops samples pushed beyond its capacity, and `create_input_ring`,
  which builds one sized for a second of audio plus a latency margin that is
  pre-filled with silence.
- `splmeter.cli`: `iter_blocks`, which yields blocks of float32 samples read
  from a binary stream, and `main`, the command above.