"""Recognizers for octets, prefix lengths, dotted quads, masks and pairs."""
