"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file hashing using the File class and pluggable hash algorithms.

HasherImpl streams the whole file through an incremental accumulator and returns
a HashResult instead of raising, so one unreadable file never stops a scan.
"""

import hashlib
import logging

from namedup.core.models import File, HashResult, DEFAULT_CHUNK_SIZE
from namedup.core.interfaces import Hasher, HashAlgorithm

logger = logging.getLogger(__name__)

CHUNK_SIZE = DEFAULT_CHUNK_SIZE


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new():
        return hashlib.sha256()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Reads files in fixed-size chunks; digests are lowercase hex strings.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_full_hash(self, file: File) -> HashResult:
        try:
            f = open(file.path, 'rb')
        except OSError as e:
            logger.error(f"Could not open {file.path} for reading: {e}")
            return HashResult.unavailable(str(e))

        try:
            with f:
                accumulator = self.algorithm.new()
                # read() returns b'' only at EOF, so a short final chunk is folded in once
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    accumulator.update(chunk)
                return HashResult.computed(accumulator.hexdigest().lower())
        except Exception as e:
            logger.exception(f"Error computing hash of {file.path}")
            return HashResult.unavailable(str(e) or type(e).__name__)
