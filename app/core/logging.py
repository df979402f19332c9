import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQLAlchemy ya imprime las queries si SQL_ECHO está activo
    logging.getLogger("sqlalchemy.engine").propagate = False
