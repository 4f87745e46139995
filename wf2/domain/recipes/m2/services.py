"""
Service definitions for the M2 compose file
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ....core.context import Context
from ....core.utils import container_name
from .env import M2Env


@dataclass
class DcService:
    """Single docker-compose service"""
    name: str
    image: str
    container_name: str
    ports: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    volumes: List[str] = field(default_factory=list)
    depends_on: List[str] = field(default_factory=list)
    environment: List[str] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "image": self.image,
            "container_name": self.container_name,
            "env_file": ".env",
        }
        for key in ("ports", "labels", "volumes", "depends_on", "environment"):
            value = getattr(self, key)
            if value:
                data[key] = list(value)
        return data


@dataclass(frozen=True)
class ServiceSpec:
    """Catalogue entry; `display` is shown after a detached `up`"""
    name: str
    image: str
    ports: tuple = ()
    labels: tuple = ()
    volumes: tuple = ()
    depends_on: tuple = ()
    display: Optional[str] = None
    
    def dc_service(self, ctx: Context, env: M2Env) -> DcService:
        image = env.values["PHP_IMAGE"] if self.image == "$PHP_IMAGE" else self.image
        return DcService(
            name=self.name,
            image=image,
            container_name=container_name(ctx.name, self.name),
            ports=list(self.ports),
            labels=list(self.labels),
            volumes=list(self.volumes),
            depends_on=list(self.depends_on),
        )


MAIL_DOMAIN = "mail.jh"

SERVICES = [
    ServiceSpec(
        name="traefik",
        image="traefik:1.7",
        ports=("80:80", "443:443", "8080:8080"),
        volumes=("/var/run/docker.sock:/var/run/docker.sock",),
        display="Traefik: http://localhost:8080",
    ),
    ServiceSpec(
        name="varnish",
        image="wearejh/magento-varnish:latest",
        depends_on=("nginx",),
        labels=("traefik.port=80",),
    ),
    ServiceSpec(
        name="nginx",
        image="wearejh/nginx:stable-m2",
        volumes=("${CONTEXT_DIR}:/var/www",),
        depends_on=("php",),
    ),
    ServiceSpec(
        name="php",
        image="$PHP_IMAGE",
        volumes=("${CONTEXT_DIR}:/var/www",),
        depends_on=("db",),
    ),
    ServiceSpec(
        name="node",
        image="wearejh/node:8-m2",
        volumes=("${CONTEXT_DIR}:/var/www",),
    ),
    ServiceSpec(
        name="db",
        image="mysql:5.6",
        ports=("3307:3306",),
        volumes=("db-data:/var/lib/mysql",),
        display="Database: localhost:3307 (user: docker, password: docker)",
    ),
    ServiceSpec(
        name="redis",
        image="redis:3-alpine",
    ),
    ServiceSpec(
        name="mail",
        image="mailhog/mailhog",
        ports=("1025",),
        labels=(f"traefik.frontend.rule=Host:{MAIL_DOMAIN}", "traefik.port=8025"),
        display=f"MailHog: https://{MAIL_DOMAIN}",
    ),
]


def compose_document(ctx: Context, env: M2Env) -> Dict[str, Any]:
    """Build the compose document for every service in the catalogue"""
    services = {}
    for spec in SERVICES:
        dc = spec.dc_service(ctx, env)
        services[dc.name] = dc.to_dict()
    return {
        "version": "3.7",
        "services": services,
        "volumes": {"db-data": {}},
    }


def compose_content(ctx: Context, env: M2Env) -> bytes:
    """Compose file bytes; JSON is a subset of YAML"""
    return json.dumps(compose_document(ctx, env), indent=2).encode("utf-8")


def service_notices() -> List[str]:
    return [spec.display for spec in SERVICES if spec.display]
