import pytest

from hexflap.data_models import SoundCue
from hexflap.sfx import CUE_TONES, SfxManager, Tone, synthesize


def test_single_tone_length_and_range():
    samples = synthesize([Tone(440, 100, 0.05, "square")], sample_rate=8000)
    assert len(samples) == 800
    assert samples.typecode == "h"
    assert all(-32767 <= s <= 32767 for s in samples)
    # Attack starts from silence
    assert samples[0] == 0


def test_channels_are_interleaved():
    mono = synthesize([Tone(440, 50, 0.02)], sample_rate=8000)
    stereo = synthesize([Tone(440, 50, 0.02)], sample_rate=8000, channels=2)
    assert len(stereo) == 2 * len(mono)
    assert list(stereo[0::2]) == list(mono)
    assert list(stereo[1::2]) == list(mono)


def test_delayed_tones_extend_the_buffer():
    tones = CUE_TONES[SoundCue.SCORE]
    samples = synthesize(tones, sample_rate=1000)
    # Four 80 ms notes, 50 ms apart
    assert len(samples) == 230


def test_empty_cue_is_silent():
    assert len(synthesize([])) == 0


def test_unknown_waveform_is_rejected():
    with pytest.raises(ValueError):
        synthesize([Tone(440, 10, 0.1, "noise")], sample_rate=1000)


def test_every_cue_has_tones():
    assert set(CUE_TONES) == set(SoundCue)


def test_muted_manager_drops_cues():
    sfx = SfxManager(muted=True)
    assert not sfx.enabled
    for cue in SoundCue:
        sfx(cue)


def test_manager_plays_every_cue_without_raising():
    sfx = SfxManager()
    for cue in SoundCue:
        sfx.play(cue)
    if sfx.sounds:
        assert set(sfx.sounds) == set(SoundCue)
        assert sfx.toggle() is False
        assert sfx.toggle() is True
