import pytest

from src.platform.logging.loguru_io import Logger, LoguruIO
from src.platform.logging.loguru_io_utils import MASK, mask_sensitive, normalize_args_kwargs


class TestMaskSensitive:
    def test_phone_in_repr_is_masked(self) -> None:
        text = "Customer(name='Jane Doe', email='jane@example.com', phone='0912345678')"

        masked = mask_sensitive(text)

        assert '0912345678' not in masked
        assert f"phone='{MASK}'" in masked
        assert "name='Jane Doe'" in masked

    def test_plain_values_are_returned_untouched(self) -> None:
        assert mask_sensitive(42) == 42

    def test_kwargs_are_masked_by_key(self) -> None:
        io = LoguruIO(Logger.base)

        masked = io.mask_sensitive({'customer_phone': '0912345678', 'party_size': 4})

        assert masked == {'customer_phone': MASK, 'party_size': 4}


class TestNormalizeArgsKwargs:
    def test_unknown_kwargs_are_dropped(self) -> None:
        def endpoint(booking_id: int) -> None:
            pass

        args, kwargs = normalize_args_kwargs(endpoint, booking_id=1, background_tasks=object())

        assert (args, kwargs) == ((), {'booking_id': 1})


@pytest.mark.unit
class TestLoggerIo:
    @pytest.mark.asyncio
    async def test_async_return_value_passes_through(self) -> None:
        @Logger.io
        async def double(*, value: int) -> int:
            return value * 2

        assert await double(value=21) == 42

    def test_exceptions_are_reraised(self) -> None:
        @Logger.io
        def explode() -> None:
            raise ValueError('bad input')

        with pytest.raises(ValueError, match='bad input'):
            explode()
