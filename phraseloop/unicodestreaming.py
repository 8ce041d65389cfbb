# SPDX-License-Identifier: GPL-3.0-only
import codecs


def decode_one_character(first_byte: bytes, get_next_byte) -> str:
    "Decode one UTF-8 character from first byte and a callable to get more bytes"
    if not first_byte:
        return ""
    assert len(first_byte) == 1
    decoder = codecs.getincrementaldecoder("utf-8")()
    s = decoder.decode(first_byte)
    # A UTF-8 sequence is at most 4 bytes, and the strict decoder raises
    # on anything invalid before that, so this loop is bounded.
    while not s:
        bb = get_next_byte()
        if not bb:
            # Truncated sequence: bubble up the UnicodeDecodeError
            return decoder.decode(b"", final=True)
        assert len(bb) == 1
        s = decoder.decode(bb)
    return s
