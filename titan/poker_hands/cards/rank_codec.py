_RANK_SYMBOLS = ('2','3','4','5','6','7','8','9','T','J','Q','K','A')
_VALUE_BY_SYMBOL = {symbol:value for value, symbol in enumerate(_RANK_SYMBOLS)}


class RankCodec:
    RANK_SYMBOLS = _RANK_SYMBOLS
    VALUE_BY_SYMBOL = _VALUE_BY_SYMBOL
    NUM_RANKS = len(RANK_SYMBOLS)

    INVALID_VALUE = -1
    INVALID_SYMBOL = ''

    @classmethod
    def gen_symbols(cls):
        yield from cls.RANK_SYMBOLS

    @classmethod
    def gen_values(cls):
        yield from range(cls.NUM_RANKS)

    @classmethod
    def is_valid_symbol(cls, symbol: str) -> bool:
        return (symbol in cls.VALUE_BY_SYMBOL)

    @classmethod
    def is_valid_value(cls, value: int) -> bool:
        return (0 <= value < cls.NUM_RANKS)

    @classmethod
    def decode(cls, symbol: str) -> int:
        return cls.VALUE_BY_SYMBOL.get(symbol, cls.INVALID_VALUE)

    @classmethod
    def encode(cls, value: int) -> str:
        if not cls.is_valid_value(value):
            return cls.INVALID_SYMBOL
        return cls.RANK_SYMBOLS[value]
