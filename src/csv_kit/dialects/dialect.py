from pydantic import BaseModel

from csv_kit.parsers.config import ParseConfig


class Dialect(BaseModel):
    name: str
    description: str = ""
    col_sep: str = ","
    row_sep: str = "\n"

    class Config:
        extra = "forbid"
        frozen = True

    def to_config(self) -> ParseConfig:
        return ParseConfig(col_sep=self.col_sep, row_sep=self.row_sep)


BUILTIN_DIALECTS: tuple[Dialect, ...] = (
    Dialect(name="default", description="Comma separated", col_sep=","),
    Dialect(name="semicolon", description="Semicolon separated", col_sep=";"),
    Dialect(name="tab", description="Tab separated", col_sep="\t"),
    Dialect(name="pipe", description="Pipe separated", col_sep="|"),
)
