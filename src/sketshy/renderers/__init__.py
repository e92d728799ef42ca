"""Styled character buffers and the glyph sets painted into them."""
