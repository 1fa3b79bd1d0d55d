from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


@dataclass
class Person:
    name: str
    school: Optional[str] = None
    # Indices into the person list of the owning Graph
    friends: List[int] = field(default_factory=list)


class Graph:
    """
    Undirected friendship graph.

    People are stored in a list and referenced by their index in it. Each
    friendship is stored as two directed edges, one in the adjacency list of
    each person.
    """

    def __init__(self, people: Iterable[Person] = ()):
        self._people: List[Person] = []
        # maps name to index into self._people
        self._index: Dict[str, int] = {}
        for person in people:
            if person.name in self._index:
                raise ValueError(f"Duplicate person {person.name!r}")
            self._index[person.name] = len(self._people)
            self._people.append(person)

    def add_person(self, name: str, school: Optional[str] = None) -> int:
        """Add a person without friends and return their index"""
        if name in self._index:
            raise ValueError(f"Duplicate person {name!r}")
        index = len(self._people)
        self._people.append(Person(name, school))
        self._index[name] = index
        return index

    def add_friendship(self, name1: str, name2: str) -> None:
        index1 = self._index[name1]
        index2 = self._index[name2]
        self._people[index1].friends.append(index2)
        self._people[index2].friends.append(index1)

    def __len__(self):
        return len(self._people)

    def __contains__(self, name):
        return name in self._index

    def lookup(self, name: str) -> Optional[Person]:
        """Return the person with the given name or None if there is none"""
        index = self._index.get(name)
        if index is None:
            return None
        return self._people[index]

    def index(self, name: str) -> Optional[int]:
        return self._index.get(name)

    def person(self, index: int) -> Person:
        return self._people[index]

    def neighbors(self, index: int) -> List[int]:
        """Return the adjacency list (indices) of the person at index"""
        return self._people[index].friends

    def people(self) -> List[Person]:
        return list(self._people)

    def names(self) -> List[str]:
        """Return all names in graph order"""
        return [person.name for person in self._people]

    def schools(self) -> List[str]:
        """Return the sorted list of distinct schools"""
        return sorted({p.school for p in self._people if p.school is not None})

    def edges(self) -> Iterator[Tuple[str, str]]:
        """Yield each friendship once as pair (name1, name2)"""
        for index1, person in enumerate(self._people):
            loops = 0
            for index2 in person.friends:
                if index2 == index1:
                    # a self-friendship appears twice in the same list
                    loops += 1
                    if loops % 2 == 0:
                        yield person.name, person.name
                elif index2 > index1:
                    yield person.name, self._people[index2].name

    def count_edges(self) -> int:
        """Return number of friendships"""
        return sum(len(person.friends) for person in self._people) // 2

    def connected_components(self) -> List[List[str]]:
        """Return a list of connected components, each a list of names."""
        visited = set()
        components = []
        for start in range(len(self._people)):
            if start in visited:
                continue
            # Start a new component
            to_visit = [start]
            component = []
            while to_visit:
                n = to_visit.pop()
                if n in visited:
                    continue
                visited.add(n)
                component.append(self._people[n].name)
                for neighbor in self._people[n].friends:
                    if neighbor not in visited:
                        to_visit.append(neighbor)
            components.append(component)
        return components
