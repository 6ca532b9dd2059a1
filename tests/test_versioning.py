import os

from score.themes.versioning import (
    FrozenVersioner, MtimeVersioner, create_versioner)


def test_mtime_version(tmp_path):
    file = tmp_path / 'a.css'
    file.write_text('a {}')
    os.utime(str(file), (1500000000.7, 1500000000.7))
    assert MtimeVersioner().version(str(file)) == '1500000000'


def test_missing_file_has_no_version(tmp_path):
    assert MtimeVersioner().version(str(tmp_path / 'nope.css')) is None
    assert MtimeVersioner().version(str(tmp_path)) is None


def test_frozen_version_does_not_change(tmp_path):
    file = tmp_path / 'a.css'
    file.write_text('a {}')
    os.utime(str(file), (1500000000, 1500000000))
    versioner = FrozenVersioner()
    assert versioner.version(str(file)) == '1500000000'
    os.utime(str(file), (1600000000, 1600000000))
    assert versioner.version(str(file)) == '1500000000'
    assert MtimeVersioner().version(str(file)) == '1600000000'


def test_frozen_versioner_retries_missing_files(tmp_path):
    file = tmp_path / 'a.css'
    versioner = FrozenVersioner()
    assert versioner.version(str(file)) is None
    file.write_text('a {}')
    os.utime(str(file), (1500000000, 1500000000))
    assert versioner.version(str(file)) == '1500000000'


def test_create_versioner():
    assert type(create_versioner(False)) is MtimeVersioner
    assert type(create_versioner(True)) is FrozenVersioner
