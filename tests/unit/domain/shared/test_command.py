import pytest

from iprecord.domain.shared.command import Confirmation, Result


class TestResult:
    def test_result_is_abstract(self):
        with pytest.raises(TypeError):
            Result()

    def test_subclass_without_to_bytes_is_abstract(self):
        class Empty(Result):
            pass

        with pytest.raises(TypeError):
            Empty()

    def test_confirmation_bytes(self):
        assert Confirmation(message="Record C1 marked as deleted").to_bytes() == (
            b"Record C1 marked as deleted"
        )
