"""
Change notifications for polling and subscribing clients.

Every write bumps a per-entity version counter in Redis and publishes a
JSON event on ``<prefix>:<entity>``. Reads always hit the database, so the
counters only tell clients *when* to read again.
"""

import json
import logging
import time

import redis
from flask import current_app

logger = logging.getLogger(__name__)

ENTITIES = ("movies", "genres", "calendar")


def create_redis_client(config):
    """Build the app's Redis client, or None when REDIS_HOST is not set."""
    if not config.get("REDIS_HOST"):
        return None
    return redis.Redis(
        host=config["REDIS_HOST"],
        port=config.get("REDIS_PORT", 6379),
        db=config.get("REDIS_DB", 0),
        decode_responses=config.get("REDIS_DECODE_RESPONSES", True),
        # The following help avoid stale connections in Redis:
        socket_keepalive=True,
        retry_on_timeout=True,
        health_check_interval=30,
        socket_connect_timeout=2,
    )


def get_redis_connection():
    """
    Returns a valid Redis connection, or None when sync is disabled. If the
    existing connection is stale, re-create the client and retry once.
    """
    for _ in range(2):
        client = getattr(current_app, "redis", None)
        if client is None:
            return None
        try:
            client.ping()
            return client
        except redis.exceptions.RedisError:
            current_app.redis = create_redis_client(current_app.config)

    raise redis.exceptions.ConnectionError("Could not reconnect to Redis.")


def _prefix():
    return current_app.config.get("SYNC_CHANNEL_PREFIX", "movietracker")


def version_key(entity):
    return f"{_prefix()}:version:{entity}"


def channel_name(entity):
    return f"{_prefix()}:{entity}"


def publish_change(entity, payload=None):
    """
    Bump ``entity``'s version and publish the event. Redis trouble is logged
    and does not fail the write that triggered it.
    """
    if entity not in ENTITIES:
        raise ValueError(f"Unknown sync entity: {entity}")

    try:
        r = get_redis_connection()
        if r is None:
            return None
        version = r.incr(version_key(entity))
        event = {
            "entity": entity,
            "version": version,
            "time": time.time(),
            "data": payload or {},
        }
        r.publish(channel_name(entity), json.dumps(event))
        return version
    except redis.exceptions.RedisError as e:
        logger.warning(f"Could not publish {entity} change: {e}")
        return None


def get_versions():
    """Current version per entity; all zero when Redis is not configured."""
    versions = {entity: 0 for entity in ENTITIES}
    r = get_redis_connection()
    if r is None:
        return versions

    values = r.mget([version_key(e) for e in ENTITIES])
    for entity, value in zip(ENTITIES, values):
        versions[entity] = int(value) if value is not None else 0
    return versions


def subscribe(*entities):
    """A Redis PubSub subscribed to the given entity channels (all by default)."""
    r = get_redis_connection()
    if r is None:
        return None
    pubsub = r.pubsub(ignore_subscribe_messages=True)
    pubsub.subscribe(*[channel_name(e) for e in (entities or ENTITIES)])
    return pubsub
