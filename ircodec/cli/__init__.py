"""
Command-line tools: ircodec-encode and ircodec-decode.
"""
