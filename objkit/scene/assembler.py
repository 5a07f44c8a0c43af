# objkit/scene/assembler.py
"""
Сборка мешей – небольшой автомат с «текущим мешем».

* `g <name>` / `o <name>` – переключиться на меш с этим именем (создать,
  если его ещё нет). Повторный заход в группу продолжает дописывать faces
  в уже существующий меш – ничего не очищается.
* `s <toggle>` – настоящее изменение флага сглаживания открывает новый
  анонимный меш `group<N>`, но только если в текущем уже есть faces.
  Пустой текущий меш переиспользуется.
* `f ...` – faces дописываются в текущий меш.
"""

from __future__ import annotations

from objkit.errors import InternalStateError
from objkit.parsing.faces import Face
from objkit.scene.mesh import Mesh

GROUP_NAME_PREFIX = "group"
_ON_WORDS = ("on",)
_OFF_WORDS = ("off",)


def parse_smooth_toggle(word: str) -> bool | None:
    """
    "on"/"off" или номер группы сглаживания (0 = выкл., иначе вкл.).
    Непонятное слово → None.
    """
    word = word.strip().lower()
    if word in _ON_WORDS:
        return True
    if word in _OFF_WORDS:
        return False
    try:
        return int(word) != 0
    except ValueError:
        return None


class MeshAssembler:
    """Владеет таблицей мешей одной загрузки (порядок вставки сохраняется)."""

    def __init__(self):
        self.meshes: dict[str, Mesh] = {}
        self.current_name: str | None = None
        self.smooth_shading = False
        # счётчик анонимных групп – свой у каждого загрузчика
        self._group_id = 0

    # -----------------------------------------------------------------
    @property
    def current_mesh(self) -> Mesh | None:
        if self.current_name is None:
            return None
        return self.meshes.get(self.current_name)

    def make_group(self, name: str) -> Mesh:
        name = name.strip()
        self.current_name = name
        if name not in self.meshes:
            self.meshes[name] = Mesh(name)
        return self.meshes[name]

    def _next_anonymous_name(self) -> str:
        while True:
            name = f"{GROUP_NAME_PREFIX}{self._group_id}"
            self._group_id += 1
            if name not in self.meshes:
                return name

    def make_group_anonymous(self) -> Mesh:
        current = self.current_mesh
        if current is not None and not current.faces:
            return current
        return self.make_group(self._next_anonymous_name())

    def set_smooth_shading(self, enabled: bool) -> None:
        if enabled == self.smooth_shading:
            return
        self.make_group_anonymous()
        self.smooth_shading = enabled

    # -----------------------------------------------------------------
    def push_faces(self, faces: list[Face]) -> None:
        mesh = self.current_mesh
        if mesh is None:
            raise InternalStateError(
                "Face encountered before any group, object or smoothing directive"
            )
        mesh.faces.extend(faces)

    def reset(self) -> None:
        self.meshes.clear()
        self.current_name = None
        self.smooth_shading = False
        self._group_id = 0
