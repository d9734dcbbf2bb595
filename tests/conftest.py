import pytest

from paper_insert.core.models import PaperRecord

ATTENTION_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title type="html">ArXiv Query: id_list=1706.03762</title>
  <id>http://arxiv.org/api/query_id</id>
  <updated>2024-01-01T00:00:00-05:00</updated>
  <entry>
    <id>http://arxiv.org/abs/1706.03762v7</id>
    <updated>2023-08-02T00:41:18Z</updated>
    <published>2017-06-12T17:57:34Z</published>
    <title>Attention Is All You Need</title>
    <summary></summary>
    <author>
      <name>Ashish Vaswani</name>
    </author>
    <author>
      <name>Noam Shazeer</name>
    </author>
  </entry>
</feed>
"""

EMPTY_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title type="html">ArXiv Query: id_list=nonexistent.0000</title>
  <id>http://arxiv.org/api/query_id</id>
  <updated>2024-01-01T00:00:00-05:00</updated>
</feed>
"""

TWO_ENTRY_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <entry>
    <id>http://arxiv.org/abs/1111.1111v1</id>
    <title>First Paper</title>
    <summary>one</summary>
    <published>2011-11-11T00:00:00Z</published>
    <updated>2011-11-11T00:00:00Z</updated>
    <author><name>A</name></author>
  </entry>
  <entry>
    <id>http://arxiv.org/abs/2222.2222v1</id>
    <title>Second Paper</title>
    <summary>two</summary>
    <published>2012-12-12T00:00:00Z</published>
    <updated>2012-12-12T00:00:00Z</updated>
    <author><name>B</name></author>
  </entry>
</feed>
"""


@pytest.fixture
def attention_feed() -> str:
    return ATTENTION_FEED


@pytest.fixture
def empty_feed() -> str:
    return EMPTY_FEED


@pytest.fixture
def two_entry_feed() -> str:
    return TWO_ENTRY_FEED


@pytest.fixture
def sample_record() -> PaperRecord:
    return PaperRecord(
        id="http://arxiv.org/abs/0000.00000v1",
        title="T",
        summary="S",
        published="2020-01-01T00:00:00Z",
        updated="2020-02-01T00:00:00Z",
        authors=("A", "B"),
    )


@pytest.fixture
def make_fetcher():
    """返回一个工厂：构造固定响应的传输函数，并记录请求过的 URL"""

    def factory(body: str, calls: list | None = None):
        async def fetch_text(url: str) -> str:
            if calls is not None:
                calls.append(url)
            return body

        return fetch_text

    return factory


@pytest.fixture
def failing_fetcher():
    def factory(error: Exception):
        async def fetch_text(url: str) -> str:
            raise error

        return fetch_text

    return factory
