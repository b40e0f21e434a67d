# aaxutils

Small helpers shared by audio test and demo programs.

- **`aaxutils.options`** reads the common command-line options from an
  argument list: `-d/--device`, `-r/--renderer`, `-c/--capture`, `-n/--num`,
  `-f/--frequency`, `-p/--pitch`, `-g/--gain`, `-t/--time`, `-m/--mode`,
  `-i/--input`, `-o/--output` and `-c/--copyright`. Options are given as
  `-x value` or `-x=value`; when an option appears more than once, the last
  one wins. `render_mode` returns a `RenderMode` (`STEREO`, `HRTF`, `SPATIAL`,
  `SURROUND`). `parse_time` turns `s`, `m:s` or `h:m:s` into seconds.
- **`aaxutils.playlist`** parses `.m3u`, `.m3u8` and `.pls` playlists
  (`read_m3u`, `read_pls`, at most `MAX_ENTRIES` entries) and
  `url_from_playlist` picks one entry of a playlist file at random, returned
  as a device name prefixed with `STREAM_DRIVER`.
- **`aaxutils.formats`** has the `AudioFormat` values and the `FORMAT_LE`,
  `FORMAT_BE` and `FORMAT_UNSIGNED` flags; `parse_audio_format` parses names
  such as `AAX_PCM16S_LE`, `audio_format` reads one from `-f/--format`, and
  `format_description` describes a format in words.
- **`aaxutils.sources`** has the `SourceType` flags and `source_string`, which
  turns a waveform, noise, filter-order or delay-stage value into its
  `|`-separated keywords.
- **`aaxutils.waveform`** has `WaveformScript`, which builds the XML sound
  script that mixes generated waveforms and noise, and `Processing`, how a new
  waveform acts on what is already there.
- **`aaxutils.geometry`** has `magnitude` of a 3-vector.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite.

## Examples

```python
from aaxutils import options

argv = ["prog", "-d", "ALSA", "-r", "hw:0", "--gain=0.5-1.0:2", "-t", "1:30"]
options.device_name(argv)   # 'ALSA on hw:0'
options.gain(argv)          # 0.5
options.gain_range(argv)    # 1.0
options.gain_time(argv)     # 2.0
options.duration(argv)      # 90.0
options.render_mode(argv)   # RenderMode.STEREO
```

```python
from aaxutils.playlist import read_m3u, read_pls

read_m3u("#EXTM3U\nhttp://radio.example.com/a\nhttp://radio.example.com/b\n")
# ['http://radio.example.com/a', 'http://radio.example.com/b']
read_pls("[playlist]\nFile1=http://radio.example.com/a\nNumberOfEntries=1\n")
# ['http://radio.example.com/a']
```

```python
from aaxutils.formats import AudioFormat, format_description, parse_audio_format

fmt = parse_audio_format("AAX_PCM16S_BE", AudioFormat.PCM16S)
format_description(fmt)     # 'signed, 16-bits per sample'
```

```python
from aaxutils.sources import SourceType
from aaxutils.waveform import Processing, WaveformScript

script = WaveformScript(base_frequency=440.0)
script.process(440.0, SourceType.SINE, 1.0, Processing.OVERWRITE)
print(script.to_xml())
```

## What it does not do

The package does not open audio devices, load sound buffers or play sound.
It reads options, reads playlist files from disk, and builds names, format
values and sound-script text for a program that does.

## Running the tests

```
pytest
```