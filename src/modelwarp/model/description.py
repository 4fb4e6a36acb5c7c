"""Model description - the dataset/column type choices written by `describe`"""
import json
from dataclasses import dataclass, field, asdict
from typing import Callable, Dict, List, Sequence

from ..exceptions import ModelDescriptionError
from ..guesser import ColumnType


@dataclass
class ColumnSpec:
    """One column of the logical model"""
    title: str                      # "Order ID"
    name: str                       # "order_id"
    type: str                       # "CONNECTION_POINT", "FACT", "DATE", "ATTRIBUTE"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'ColumnSpec':
        return cls(
            title=data['title'],
            name=data.get('name', data['title']),
            type=data['type'],
        )


@dataclass
class DatasetDescription:
    """Complete model description of a dataset"""
    title: str                      # "Orders"
    columns: List[ColumnSpec] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'title': self.title,
            'columns': [c.to_dict() for c in self.columns],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: dict) -> 'DatasetDescription':
        return cls(
            title=data['title'],
            columns=[ColumnSpec.from_dict(c) for c in data['columns']],
        )

    @classmethod
    def from_json(cls, json_str: str) -> 'DatasetDescription':
        return cls.from_dict(json.loads(json_str))

    def save(self, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_json() + "\n")

    @classmethod
    def load(cls, path: str) -> 'DatasetDescription':
        try:
            with open(path, encoding='utf-8') as f:
                return cls.from_json(f.read())
        except OSError as e:
            raise ModelDescriptionError(path, e.strerror) from e
        except json.JSONDecodeError as e:
            raise ModelDescriptionError(path, f"invalid JSON ({e.msg})") from e
        except (KeyError, TypeError) as e:
            raise ModelDescriptionError(path, f"missing or malformed field {e}") from e


# ask(column_number, header, options) -> chosen option
AskFn = Callable[[int, str, List[str]], str]


def choose_column_types(
    headers: Sequence[str],
    guess: Dict[str, List[ColumnType]],
    ask: AskFn,
) -> List[ColumnSpec]:
    """
    Build the model columns by asking for one type per column.

    A dataset has at most one connection point: once it is chosen, later
    columns no longer offer it. Columns left with no candidates offer
    attribute only.
    """
    columns = []
    connection_point_set = False

    for i, header in enumerate(headers, 1):
        options = [str(t) for t in guess.get(header, [])]
        if connection_point_set:
            options = [t for t in options if t != ColumnType.CONNECTION_POINT.value]
        if not options:
            options = [ColumnType.ATTRIBUTE.value]

        choice = ask(i, header, options)
        columns.append(ColumnSpec(title=header, name=header, type=choice.upper()))
        if choice == ColumnType.CONNECTION_POINT.value:
            connection_point_set = True

    return columns
