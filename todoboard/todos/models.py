from dataclasses import dataclass


@dataclass(frozen=True)
class Todo:
    id: int
    user_id: int
    title: str
    completed: bool = False

    @classmethod
    def from_json(cls, data):
        """Build a Todo from the service's JSON, ignoring unknown keys."""
        return cls(
            id=int(data['id']),
            user_id=int(data['userId']),
            title=str(data['title']),
            completed=bool(data.get('completed', False)),
        )

    def __repr__(self):
        return f'<Todo {self.id}: {self.title}>'


@dataclass(frozen=True)
class User:
    id: int
    name: str

    @classmethod
    def from_json(cls, data):
        return cls(id=int(data['id']), name=str(data['name']))

    def __repr__(self):
        return f'<User {self.id}: {self.name}>'
