"""Определение проекта контейнера по его меткам.

Метки просматриваются в порядке их появления в строке `Labels`; первая
распознанная метка с непустым значением определяет проект, дальнейший
просмотр прекращается.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterator, Tuple

from docker_ps.docker_api.models import ContainerRecord
from docker_ps.projects.models import Project, ProjectType

LOGGER = logging.getLogger(__name__)

GROUP_LABEL = "com.github.AlekSi.docker-ps.group"
COMPOSE_LABEL = "com.docker.compose.project"
KUBERNETES_LABEL = "io.kubernetes.pod.namespace"
MINIKUBE_LABEL = "name.minikube.sigs.k8s.io"
TALOS_LABEL = "talos.cluster.name"

# метка -> (тип проекта, нужно ли убрать образ с длинным sha256-именем)
KNOWN_LABELS: Dict[str, Tuple[ProjectType, bool]] = {
    GROUP_LABEL: (ProjectType.GROUP, False),
    COMPOSE_LABEL: (ProjectType.COMPOSE, False),
    KUBERNETES_LABEL: (ProjectType.KUBERNETES, True),
    MINIKUBE_LABEL: (ProjectType.MINIKUBE, True),
    TALOS_LABEL: (ProjectType.TALOS, False),
}


def iter_labels(labels: str) -> Iterator[Tuple[str, str]]:
    """Разбирает строку "k=v,k=v", пропуская сегменты без ровно одного "="."""

    for part in labels.split(","):
        pair = part.split("=")
        if len(pair) != 2:
            continue
        yield pair[0], pair[1]


def classify(record: ContainerRecord) -> ContainerRecord:
    """Возвращает копию записи с заполненным проектом."""

    project = Project()
    image = record.image
    for key, value in iter_labels(record.labels):
        known = KNOWN_LABELS.get(key)
        if known is None:
            continue
        project_type, drop_image = known
        project = Project(project_type, value)
        if drop_image:
            image = ""
        if value:
            break

    if not project.name:
        # распознанная метка с пустым значением не образует проекта
        project = Project()
    LOGGER.debug("Container %s classified as %s", record.name, project)
    return dataclasses.replace(record, project=project, image=image)
