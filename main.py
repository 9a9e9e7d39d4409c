import contextlib

from quotes.config import CONFIG_FILE, Config
from quotes.log import escape_tag, logger, setup_logging


def load_config() -> Config:
    try:
        return Config.load()
    except Exception:
        logger.exception(f"加载配置文件 {CONFIG_FILE} 时出错，使用默认配置")
        return Config()


def main() -> None:
    config = load_config()
    setup_logging(config)
    logger.opt(colors=True).info(f"Quote endpoint: <c>{escape_tag(config.api_url)}</>")

    from gui.window import gui_main

    try:
        gui_main(config)
    except Exception:
        logger.exception("Unexpected error occurred")


def run() -> None:
    with contextlib.suppress(KeyboardInterrupt):
        main()


if __name__ == "__main__":
    run()
