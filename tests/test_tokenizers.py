"""Unit tests for tokenizers."""

import io

import pytest

from tokscan.tokenizer import BaseTokenizer, WhitespaceTokenizer


class TestWhitespaceTokenizer:
    """Test suite for the whitespace tokenizer."""

    def test_mixed_whitespace(self):
        """Test spaces, tabs and newlines all separate tokens."""
        tokenizer = WhitespaceTokenizer()

        tokens = tokenizer.tokenize_text('alpha  beta\tgamma\n')

        assert tokens == ['alpha', 'beta', 'gamma']

    def test_empty_text(self):
        """Test empty text produces no tokens."""
        tokenizer = WhitespaceTokenizer()

        assert tokenizer.tokenize_text('') == []

    @pytest.mark.parametrize('text', ['   ', '\n', ' \t\n\r\v\f ', '\n\n\n'])
    def test_whitespace_only(self, text):
        """Test text made only of whitespace produces no tokens."""
        tokenizer = WhitespaceTokenizer()

        assert tokenizer.tokenize_text(text) == []

    @pytest.mark.parametrize('text', ['a', 'hello', 'x,y;z!', 'tab\\t'])
    def test_no_whitespace_single_token(self, text):
        """Test text without whitespace is one token equal to the text."""
        tokenizer = WhitespaceTokenizer()

        assert tokenizer.tokenize_text(text) == [text]

    def test_no_empty_tokens(self):
        """Test leading, trailing and repeated whitespace is collapsed."""
        tokenizer = WhitespaceTokenizer()

        tokens = tokenizer.tokenize_text('\n\n  one \t\t two   three  \n')

        assert tokens == ['one', 'two', 'three']
        assert all(tokens)

    def test_final_token_without_trailing_whitespace(self):
        """Test the end of input closes the last token."""
        tokenizer = WhitespaceTokenizer()

        assert tokenizer.tokenize_text('first last') == ['first', 'last']

    def test_character_after_token_is_kept(self):
        """Test the character right after a delimiter starts a token."""
        tokenizer = WhitespaceTokenizer()

        assert tokenizer.tokenize_text('a b c') == ['a', 'b', 'c']

    def test_resplitting_is_idempotent(self):
        """Test splitting the space-joined tokens gives the same tokens."""
        tokenizer = WhitespaceTokenizer()
        text = ' lorem\tipsum\n\ndolor  sit\r\namet,  consectetur \f'

        tokens = tokenizer.tokenize_text(text)
        resplit = tokenizer.tokenize_text(' '.join(tokens))

        assert resplit == tokens

    def test_long_token(self):
        """Test tokens longer than any fixed buffer are kept intact."""
        tokenizer = WhitespaceTokenizer()
        long_token = 'x' * 10_000

        tokens = tokenizer.tokenize_text(f'short {long_token} end')

        assert tokens == ['short', long_token, 'end']

    def test_token_split_across_chunks(self):
        """Test a token spanning several chunks is yielded once."""
        tokenizer = WhitespaceTokenizer()
        chunks = ['al', 'pha be', 'ta', ' ', 'gam', 'ma']

        tokens = list(tokenizer.tokenize(chunks))

        assert tokens == ['alpha', 'beta', 'gamma']

    def test_tokenize_is_lazy(self):
        """Test tokens are yielded before the input is exhausted."""
        tokenizer = WhitespaceTokenizer()

        def chunks():
            yield 'first second '
            raise AssertionError('input read past the first token')

        tokens = tokenizer.tokenize(chunks())

        assert next(tokens) == 'first'

    def test_unicode_space_is_not_a_delimiter(self):
        """Test only ASCII whitespace separates tokens."""
        tokenizer = WhitespaceTokenizer()

        tokens = tokenizer.tokenize_text('caf\u00e9 a\u00a0b')

        assert tokens == ['caf\u00e9', 'a\u00a0b']

    def test_tokenize_stream_one_char_reads(self):
        """Test reading a stream one character at a time."""
        tokenizer = WhitespaceTokenizer()
        stream = io.StringIO('  alpha  beta\tgamma\n')

        tokens = list(tokenizer.tokenize_stream(stream, chunk_size=1))

        assert tokens == ['alpha', 'beta', 'gamma']
        assert not stream.closed

    def test_tokenize_stream_empty(self):
        """Test an empty stream yields no tokens."""
        tokenizer = WhitespaceTokenizer()

        assert list(tokenizer.tokenize_stream(io.StringIO(''))) == []

    @pytest.mark.parametrize('ch', [' ', '\t', '\n', '\v', '\f', '\r'])
    def test_is_delimiter(self, ch):
        """Test the C-locale whitespace characters are delimiters."""
        tokenizer = WhitespaceTokenizer()

        assert tokenizer.is_delimiter(ch)
        assert not tokenizer.is_delimiter('a')


class TestBaseTokenizer:
    """Test suite for the tokenizer base class."""

    def test_cannot_instantiate(self):
        """Test the abstract base class cannot be instantiated."""
        with pytest.raises(TypeError):
            BaseTokenizer()  # type: ignore

    def test_subclass_uses_its_delimiter(self):
        """Test the shared scanning loop honors a subclass predicate."""

        class CommaTokenizer(BaseTokenizer):
            def is_delimiter(self, ch):
                return ch == ','

        tokenizer = CommaTokenizer()

        assert tokenizer.tokenize_text(',a b,,c,') == ['a b', 'c']
