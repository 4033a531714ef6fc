"""Scan Markdown into tokens in 3 lines — zero config, zero deps."""

from tinta import scan

for token in scan("# Hello\n\nSome text.\n\n- one\n- two"):
    print(token.type.name, token.text or token.tag)
