"""
Class for a single FASTQ record. A record is the four consecutive lines of a FASTQ file:
the header, the sequence, the separator and the quality string.

Records are built on the fly while scanning and are not kept afterwards, so the class is
a plain holder with no identity beyond the position of its header in the file.
"""

__all__ = ["FastqRecord"]


class FastqRecord:
    """
    A class representing one four-line FASTQ entry

    Lines are stored exactly as read, minus the line terminator.

    :param header: The identifier line, expected to start with '@'
    :param sequence: The sequence line
    :param separator: The third line, expected to start with '+'
    :param quality: The quality line, expected to be as long as the sequence
    """
    __slots__ = ("header", "sequence", "separator", "quality")

    def __init__(self,
                 header: str,
                 sequence: str,
                 separator: str,
                 quality: str):

        self.header = header
        self.sequence = sequence
        self.separator = separator
        self.quality = quality

    def __repr__(self):
        return (f"FastqRecord(header={self.header!r}, sequence={self.sequence!r}, "
                f"separator={self.separator!r}, quality={self.quality!r})")

    def __eq__(self, other):
        if not isinstance(other, FastqRecord):
            return NotImplemented
        return self.lines() == other.lines()

    def lines(self) -> tuple[str, str, str, str]:
        """
        The four raw lines in file order.
        """
        return self.header, self.sequence, self.separator, self.quality
