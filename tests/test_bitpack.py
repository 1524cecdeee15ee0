import io
import pytest

from bitpack import EOF, BitReader, BitWriter


def test_writer_packs_msb_first_and_pads():
    out = io.BytesIO()
    w = BitWriter(out)
    w.write_bits(3, 0b101)
    w.write_bits(9, 0x1FF)
    w.close()
    assert out.getvalue() == b"\xbf\xf0"
    assert w.bits_written == 12


def test_reader_reads_fields_then_eof():
    r = BitReader(io.BytesIO(b"\xbf\xf0"))
    assert r.read_bits(3) == 0b101
    assert r.read_bits(9) == 0x1FF
    assert r.read_bits(4) == 0
    assert r.read_bits(1) == EOF
    assert r.bits_read == 16


def test_reader_32_bit_field():
    r = BitReader(io.BytesIO(bytes.fromhex("face8201")))
    assert r.read_bits(32) == 0xFACE8201


def test_reader_eof_when_field_longer_than_remaining():
    r = BitReader(io.BytesIO(b"\xff"))
    assert r.read_bits(9) == EOF


def test_reset_rereads_from_start():
    r = BitReader(io.BytesIO(b"AB"), chunk_size=1)
    assert r.read_bits(8) == 0x41
    assert r.read_bits(8) == 0x42
    assert r.read_bits(8) == EOF
    r.reset()
    assert r.bits_read == 0
    assert r.read_bits(8) == 0x41


def test_reader_stays_at_eof_after_short_read():
    r = BitReader(io.BytesIO(b"\xab"))
    assert r.read_bits(9) == EOF
    assert r.read_bits(8) == EOF
    assert r.read_bits(1) == EOF


def test_writer_flushes_in_chunks():
    out = io.BytesIO()
    w = BitWriter(out, chunk_size=2)
    for b in b"hello":
        w.write_bits(8, b)
    assert out.getvalue() == b"hell"
    w.close()
    assert out.getvalue() == b"hello"


@pytest.mark.parametrize("n", [0, 33, -1])
def test_bit_count_out_of_range(n):
    with pytest.raises(ValueError):
        BitWriter(io.BytesIO()).write_bits(n, 0)
    with pytest.raises(ValueError):
        BitReader(io.BytesIO(b"\x00" * 8)).read_bits(n)


def test_value_must_fit():
    w = BitWriter(io.BytesIO())
    with pytest.raises(ValueError):
        w.write_bits(3, 8)
    with pytest.raises(ValueError):
        w.write_bits(3, -1)


def test_close_is_idempotent_and_final():
    out = io.BytesIO()
    w = BitWriter(out)
    w.write_bits(1, 1)
    w.close()
    w.close()
    assert out.getvalue() == b"\x80"
    assert not out.closed
    with pytest.raises(ValueError):
        w.write_bits(1, 1)
