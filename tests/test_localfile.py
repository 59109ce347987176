import base64

import pytest

from splitcrypt.crypto import CryptoError, NoEncryption, build_crypto_processor
from splitcrypt.localfile import LocalFile, run_local_copy
from splitcrypt.options import CommandParameters

KEY = base64.b64encode(bytes(range(32))).decode()


def params(max_size=2**64 - 1, decrypt=False, dry_run=False, key=None):
    processor = build_crypto_processor(key) if key else NoEncryption()
    return CommandParameters(
        crypto_processor=processor,
        max_file_size=max_size,
        decrypt=decrypt,
        dry_run=dry_run,
    )


def test_split_names_and_content(tmp_path):
    src = tmp_path / "src.bin"
    src.write_bytes(b"0123456789")
    dest = str(tmp_path / "out")
    with LocalFile.open(str(src), params(4)) as lf:
        assert lf.num_parts == 3
        parts = [lf.get_part(i, dest) for i in range(lf.num_parts)]
    assert [name for _, name in parts] == [dest + ".0", dest + ".1", dest + ".2"]
    assert b"".join(data for data, _ in parts) == b"0123456789"
    assert all(len(data) <= 4 for data, _ in parts)


def test_single_part_keeps_name(tmp_path):
    src = tmp_path / "src.bin"
    src.write_bytes(b"abc")
    dest = str(tmp_path / "out")
    with LocalFile.open(str(src), params()) as lf:
        assert lf.num_parts == 1
        assert lf.get_part(0, dest) == (b"abc", dest)


def test_two_digit_suffix(tmp_path):
    src = tmp_path / "src.bin"
    src.write_bytes(b"x" * 12)
    with LocalFile.open(str(src), params(1)) as lf:
        assert lf.num_parts == 12
        _, name = lf.get_part(5, "d")
    assert name == "d.05"


def test_three_digit_suffix(tmp_path):
    src = tmp_path / "src.bin"
    src.write_bytes(b"y" * 101)
    with LocalFile.open(str(src), params(1)) as lf:
        _, name = lf.get_part(7, "d")
    assert name == "d.007"


def test_part_out_of_range(tmp_path):
    src = tmp_path / "src.bin"
    src.write_bytes(b"abcd")
    with LocalFile.open(str(src), params(2)) as lf:
        with pytest.raises(IndexError):
            lf.get_part(2, "d")


def test_zero_max_size_rejected(tmp_path):
    src = tmp_path / "src.bin"
    src.write_bytes(b"abcd")
    with pytest.raises(ValueError):
        LocalFile.open(str(src), params(0))


def test_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        LocalFile.open(str(tmp_path / "none"), params(2))


def test_empty_part_list(tmp_path):
    with pytest.raises(ValueError, match="File list is empty"):
        LocalFile.open(str(tmp_path / "nothing"), params(decrypt=True))


@pytest.mark.parametrize("size,max_size", [(10, 4), (25, 2), (7, 100)])
def test_encrypted_round_trip(tmp_path, size, max_size):
    original = bytes(i % 251 for i in range(size))
    src = tmp_path / "src.bin"
    src.write_bytes(original)
    parts_dir = tmp_path / "parts"
    parts_dir.mkdir()
    run_local_copy(str(src), str(parts_dir / "piece"), params(max_size, key=KEY))
    stored = sorted(p.name for p in parts_dir.iterdir())
    assert len(stored) == -(-size // max_size)
    restored = tmp_path / "restored.bin"
    run_local_copy(str(parts_dir / "piece"), str(restored), params(decrypt=True, key=KEY))
    assert restored.read_bytes() == original


def test_encrypted_parts_differ_from_plain(tmp_path):
    src = tmp_path / "src.bin"
    src.write_bytes(b"hello world")
    out = tmp_path / "enc"
    run_local_copy(str(src), str(out), params(key=KEY))
    data = out.read_bytes()
    assert len(data) == len(b"hello world") + 12 + 32
    assert b"hello world" not in data


def test_tampered_part_fails(tmp_path):
    src = tmp_path / "src.bin"
    src.write_bytes(b"secret data here")
    parts_dir = tmp_path / "parts"
    parts_dir.mkdir()
    run_local_copy(str(src), str(parts_dir / "p"), params(key=KEY))
    part = parts_dir / "p"
    raw = bytearray(part.read_bytes())
    raw[14] ^= 0xFF
    part.write_bytes(bytes(raw))
    with pytest.raises(CryptoError):
        run_local_copy(str(part), str(tmp_path / "r"), params(decrypt=True, key=KEY))


def test_dry_run_writes_nothing(tmp_path):
    src = tmp_path / "src.bin"
    src.write_bytes(b"abcdef")
    parts_dir = tmp_path / "parts"
    parts_dir.mkdir()
    run_local_copy(str(src), str(parts_dir / "p"), params(2, dry_run=True))
    assert list(parts_dir.iterdir()) == []


def test_decrypt_dry_run_creates_empty_file(tmp_path):
    (tmp_path / "a.0").write_bytes(b"ab")
    (tmp_path / "a.1").write_bytes(b"cd")
    dest = tmp_path / "joined"
    run_local_copy(str(tmp_path / "a"), str(dest), params(decrypt=True, dry_run=True))
    assert dest.read_bytes() == b""


def test_join_plain_parts_in_name_order(tmp_path):
    (tmp_path / "a.1").write_bytes(b"cd")
    (tmp_path / "a.0").write_bytes(b"ab")
    (tmp_path / "b.0").write_bytes(b"zz")
    dest = tmp_path / "joined"
    run_local_copy(str(tmp_path / "a"), str(dest), params(decrypt=True))
    assert dest.read_bytes() == b"abcd"


def test_relative_name_uses_current_directory(tmp_path, monkeypatch):
    (tmp_path / "rel.0").write_bytes(b"12")
    (tmp_path / "rel.1").write_bytes(b"34")
    monkeypatch.chdir(tmp_path)
    with LocalFile.open("rel", params(decrypt=True)) as lf:
        assert lf.num_parts == 2
        assert lf.get_part(1, "ignored") == (b"34", "rel.1")


def test_get_part_prints_summary(tmp_path, capsys):
    src = tmp_path / "src.bin"
    src.write_bytes(b"abc")
    with LocalFile.open(str(src), params()) as lf:
        lf.get_part(0, "dest")
    assert capsys.readouterr().out == "File part 0 size 3 file name dest\n"