import pytest

from static_search.domain.repositories.base import OutputSink


class MemorySink(OutputSink):
    """Keeps written artifacts in a dict, last write wins"""

    def __init__(self):
        self.files = {}
        self.write_count = 0

    def write(self, output_path, data):
        if isinstance(data, str):
            data = data.encode('utf-8')
        self.files[output_path] = data
        self.write_count += 1


@pytest.fixture
def memory_sink():
    return MemorySink()
