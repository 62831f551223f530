"""Symmetric XOR, one-time mask and CBC encryption of messages and files."""

from __future__ import annotations

import os
import random
from contextlib import ExitStack
from itertools import cycle
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

ALPHA_NUM = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
# Keys are drawn from every character of the alphabet but its last one.
_KEY_ALPHABET = ALPHA_NUM[:-1]

MASK_PATH = Path("src") / "Partie1" / "mask.txt"
CBC_BLOCK_LENGTH = 256

Data = Union[bytes, bytearray, str]
PathLike = Union[str, os.PathLike]


class SymCryptError(Exception):
    """Raised when an encryption or decryption cannot be carried out."""


def _to_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _c_string(data: bytes) -> bytes:
    """The part of data before its first zero byte."""
    return data.split(b"\0", 1)[0]


def _xor_cycle(data: bytes, key: bytes) -> bytes:
    return bytes(b ^ k for b, k in zip(data, cycle(key)))


def _xor_bytes(first: bytes, second: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(first, second))


def _open(stack: ExitStack, path: PathLike, mode: str) -> BinaryIO:
    try:
        return stack.enter_context(open(path, mode))
    except OSError as exc:
        raise SymCryptError(f"unable to open {path}: {exc.strerror}") from exc


def _size(path: PathLike) -> int:
    try:
        return Path(path).stat().st_size
    except OSError as exc:
        raise SymCryptError(f"unable to stat {path}: {exc.strerror}") from exc


def _prepare_parent(path: PathLike) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def gen_key(length: int) -> str:
    """Return a random alphanumeric key of the given length."""
    if length < 0:
        raise ValueError("key length must not be negative")
    return "".join(random.choices(_KEY_ALPHABET, k=length))


def xor_message(message: Data, key: Data) -> bytes:
    """XOR the message, up to its first zero byte, with the repeated key.

    Bytes after the first zero byte of the message are kept unchanged.
    """
    data = _to_bytes(message)
    key_bytes = _c_string(_to_bytes(key))
    if not key_bytes:
        raise SymCryptError("xor : key length 0")
    text = _c_string(data)
    return _xor_cycle(text, key_bytes) + data[len(text):]


def xor_length(message: Data, key: Data) -> bytes:
    """XOR every byte of the message with the key cycled with its terminating zero byte."""
    key_bytes = _c_string(_to_bytes(key))
    if not key_bytes:
        raise SymCryptError("xor : key length 0")
    return _xor_cycle(_to_bytes(message), key_bytes + b"\0")


def xor_files(key_path: PathLike, input_path: PathLike, output_path: PathLike) -> int:
    """XOR the input file with the key file into the output file; return the bytes written."""
    with ExitStack() as stack:
        key_file = _open(stack, key_path, "rb")
        input_file = _open(stack, input_path, "rb")
        output_file = _open(stack, output_path, "wb")
        message = input_file.read()
        if not message:
            raise SymCryptError("xor : empty message")
        key = key_file.read()
        if not key:
            raise SymCryptError("xor : empty key")
        output_file.write(xor_length(message, key))
    return len(message)


def save_mask(mask: Data, mask_path: PathLike = MASK_PATH) -> None:
    """Store the mask, replacing any previous one."""
    data = _to_bytes(mask)
    if not data:
        raise SymCryptError("cannot save an empty mask")
    _prepare_parent(mask_path)
    try:
        Path(mask_path).write_bytes(data)
    except OSError as exc:
        raise SymCryptError(f"unable to write mask {mask_path}: {exc.strerror}") from exc


def fetch_mask(mask_path: PathLike = MASK_PATH) -> bytes:
    """Return the stored mask."""
    try:
        mask = Path(mask_path).read_bytes()
    except OSError as exc:
        raise SymCryptError(f"unable to read mask {mask_path}: {exc.strerror}") from exc
    if not mask:
        raise SymCryptError(f"mask file {mask_path} is empty")
    return mask


def mask_xor_crypt(message: Data, mask_path: PathLike = MASK_PATH) -> bytes:
    """Encrypt the message with a fresh random mask of its length and store the mask."""
    data = _to_bytes(message)
    text = _c_string(data)
    mask = gen_key(len(text)).encode("ascii")
    encrypted = xor_length(text, mask)
    save_mask(mask, mask_path)
    return encrypted + data[len(text):]


def mask_xor_uncrypt(message: Data, mask_path: PathLike = MASK_PATH) -> bytes:
    """Decrypt the message with the stored mask, then keep only the mask part used."""
    data = _to_bytes(message)
    mask = fetch_mask(mask_path)
    plain = xor_length(data[: len(mask)], mask) + data[len(mask):]
    save_mask(mask[: len(_c_string(plain))], mask_path)
    return plain


def mask_xor_crypt_files(
    key_path: PathLike,
    input_path: PathLike,
    output_path: PathLike,
    mask_path: PathLike = MASK_PATH,
) -> int:
    """Encrypt the input file with the key file used as a mask; return the bytes written."""
    if _size(key_path) < _size(input_path):
        raise SymCryptError("key size less than message size, impossible for a mask crypt.")
    length = _size(input_path)
    with ExitStack() as stack:
        key_file = _open(stack, key_path, "rb")
        input_file = _open(stack, input_path, "rb")
        output_file = _open(stack, output_path, "wb")
        mask = key_file.read(length)
        if not mask:
            raise SymCryptError("mask_xor_crypt : unable to read the mask")
        message = input_file.read(length)
        if not message:
            raise SymCryptError("mask_xor_crypt : unable to read the message")
        encrypted = xor_length(message, mask)
        output_file.write(encrypted)
    save_mask(mask, mask_path)
    return len(encrypted)


def mask_xor_uncrypt_files(
    input_path: PathLike,
    output_path: PathLike,
    mask_path: PathLike = MASK_PATH,
) -> int:
    """Decrypt the input file with the stored mask; return the bytes written."""
    if _size(mask_path) < _size(input_path):
        raise SymCryptError("key size less than message size, impossible for a mask crypt.")
    with ExitStack() as stack:
        input_file = _open(stack, input_path, "rb")
        output_file = _open(stack, output_path, "wb")
        mask = fetch_mask(mask_path)
        message = input_file.read(len(mask))
        if not message:
            raise SymCryptError("mask_xor_uncrypt : unable to read the message")
        plain = xor_length(message, mask)
        output_file.write(plain)
    return len(plain)


def _init_vector(init_vector: Data) -> bytes:
    vector = _c_string(_to_bytes(init_vector))[:CBC_BLOCK_LENGTH]
    return vector.ljust(CBC_BLOCK_LENGTH, b"\0")


def _blocks(stream: BinaryIO) -> Iterator[bytes]:
    while True:
        block = stream.read(CBC_BLOCK_LENGTH)
        if not block:
            return
        yield block
        if len(block) < CBC_BLOCK_LENGTH:
            return


def cbc_crypt(
    message_path: PathLike,
    init_vector: Data,
    encrypted_path: PathLike,
    mask_path: PathLike = MASK_PATH,
    key_path: Optional[PathLike] = None,
) -> int:
    """Encrypt a file in chained 256-byte blocks; return the number of blocks.

    Each block's key is random unless read from key_path; the keys are
    written to mask_path. The last block is padded with spaces.
    """
    vector = _init_vector(init_vector)
    count = 0
    _prepare_parent(mask_path)
    with ExitStack() as stack:
        source = _open(stack, message_path, "rb")
        target = _open(stack, encrypted_path, "wb")
        mask_file = _open(stack, mask_path, "wb")
        key_file = _open(stack, key_path, "rb") if key_path is not None else None
        for chunk in _blocks(source):
            block = _xor_bytes(chunk.ljust(CBC_BLOCK_LENGTH, b" "), vector)
            if key_file is None:
                key = gen_key(CBC_BLOCK_LENGTH).encode("ascii")
            else:
                key = key_file.read(CBC_BLOCK_LENGTH)
                if len(chunk) > len(key):
                    raise SymCryptError("cbc_crypt_rec get mask went wrong")
                key = key.ljust(CBC_BLOCK_LENGTH, b"\0")
            block = _xor_bytes(block, key)
            mask_file.write(key)
            target.write(block)
            vector = block
            count += 1
    return count


def cbc_uncrypt(
    encrypted_path: PathLike,
    init_vector: Data,
    uncrypted_path: PathLike,
    mask_path: PathLike = MASK_PATH,
    key_path: Optional[PathLike] = None,
) -> int:
    """Decrypt a file produced by cbc_crypt; return the number of blocks.

    Block keys come from key_path when given, otherwise from mask_path,
    which must exist in either case.
    """
    vector = _init_vector(init_vector)
    count = 0
    with ExitStack() as stack:
        source = _open(stack, encrypted_path, "rb")
        target = _open(stack, uncrypted_path, "wb")
        mask_file = _open(stack, mask_path, "rb")
        key_file = _open(stack, key_path, "rb") if key_path is not None else None
        keys = key_file if key_file is not None else mask_file
        for chunk in _blocks(source):
            block = chunk.ljust(CBC_BLOCK_LENGTH, b"\0")
            key = keys.read(CBC_BLOCK_LENGTH)
            if not key:
                raise SymCryptError("cbc_uncrypt : no mask left for the block")
            plain = _xor_bytes(_xor_bytes(block, key.ljust(CBC_BLOCK_LENGTH, b"\0")), vector)
            target.write(plain)
            vector = block
            count += 1
    return count