import logging
from pathlib import Path

import platformdirs

from batched_subscribe.config import config
from batched_subscribe.demo import App


def main():
    log_file = Path(platformdirs.user_log_dir(opinion=False)) / "batched-subscribe.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, "w")
    stream_handler = logging.StreamHandler()
    logging.basicConfig(
        handlers=[file_handler, stream_handler],
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    App().mainloop()


if __name__ == "__main__":
    main()
