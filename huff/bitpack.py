EOF = -1  # returned by BitReader.read_bits when the source runs dry

class BitWriter:
    def __init__(self, f, chunk_size: int = 1 << 16):
        self.f = f
        self.chunk_size = chunk_size
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.bits_written = 0
        self.closed = False

    def write_bits(self, n: int, value: int):
        """Write the low 'n' bits of value (MSB-first)."""
        if not (1 <= n <= 32):
            raise ValueError(f"bit count out of range (1..32): {n}")
        if value < 0 or value >> n:
            raise ValueError(f"value {value} does not fit in {n} bits")
        if self.closed:
            raise ValueError("write to closed BitWriter")
        self._cur = (self._cur << n) | value
        self._nbits += n
        self.bits_written += n
        while self._nbits >= 8:
            self._nbits -= 8
            self._buf.append((self._cur >> self._nbits) & 0xFF)
        self._cur &= (1 << self._nbits) - 1
        if len(self._buf) >= self.chunk_size:
            self._flush()

    def _flush(self):
        if self._buf:
            self.f.write(bytes(self._buf))
            self._buf.clear()

    def close(self):
        """Pad remaining bits with zeros and flush. The sink stays open."""
        if self.closed:
            return
        if self._nbits > 0:
            self._buf.append((self._cur << (8 - self._nbits)) & 0xFF)
            self._cur = 0
            self._nbits = 0
        self._flush()
        self.f.flush()
        self.closed = True

class BitReader:
    def __init__(self, f, chunk_size: int = 1 << 16):
        self.f = f
        self.chunk_size = chunk_size
        self._buf = b""
        self._i = 0
        self._cur = 0
        self._nbits = 0  # unread bits held in _cur
        self.bits_read = 0

    def _next_byte(self):
        if self._i >= len(self._buf):
            self._buf = self.f.read(self.chunk_size)
            self._i = 0
            if not self._buf:
                return None
        b = self._buf[self._i]
        self._i += 1
        return b

    def read_bits(self, n: int) -> int:
        """Read 'n' bits (MSB-first); EOF if fewer than n bits remain."""
        if not (1 <= n <= 32):
            raise ValueError(f"bit count out of range (1..32): {n}")
        while self._nbits < n:
            b = self._next_byte()
            if b is None:
                # stay at EOF; drop the partial field
                self._cur = 0
                self._nbits = 0
                return EOF
            self._cur = (self._cur << 8) | b
            self._nbits += 8
        self._nbits -= n
        value = self._cur >> self._nbits
        self._cur &= (1 << self._nbits) - 1
        self.bits_read += n
        return value

    def reset(self):
        """Rewind to the first bit of the source."""
        self.f.seek(0)
        self._buf = b""
        self._i = 0
        self._cur = 0
        self._nbits = 0
        self.bits_read = 0
