from paper_insert.core.operators.datasource.arxiv import ArxivCatalogClient, aiohttp_fetcher

__all__ = ["ArxivCatalogClient", "aiohttp_fetcher"]
