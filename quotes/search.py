import httpx

from .config import Config
from .exception import APIFailure
from .log import escape_tag, logger
from .schemas import Quote
from .state import FetchOutcome


async def search_quote(config: Config | None = None, *, transport: httpx.AsyncBaseTransport | None = None) -> Quote:
    config = config or Config.load()

    try:
        async with httpx.AsyncClient(proxy=config.proxy, transport=transport, trust_env=False) as client:
            resp = await client.get(config.api_url, timeout=config.request_timeout)
            resp.raise_for_status()
    except Exception as e:
        raise APIFailure(f"Request failed: {e!r}") from e

    try:
        return Quote.model_validate(resp.json())
    except Exception as e:
        raise APIFailure("Failed to parse quote from response") from e


async def find_quote(
    config: Config | None = None, *, transport: httpx.AsyncBaseTransport | None = None
) -> FetchOutcome:
    """执行一次名言查询，失败时返回 `APIFailure` 而不是抛出

    参数:
        config: 应用配置，缺省时使用 `Config.load()`
        transport: 可选的 httpx transport，测试时用于替换网络
    """
    config = config or Config.load()
    logger.opt(colors=True).debug(f"Searching quote from <c>{escape_tag(config.api_url)}</>")

    try:
        quote = await search_quote(config, transport=transport)
    except APIFailure as err:
        logger.opt(exception=err).warning(f"Quote search failed: {err}")
        return err

    logger.opt(colors=True).debug(f"Found quote by <y>{escape_tag(quote.author)}</>")
    return quote
