# nacoskit

Building blocks for a service-discovery and configuration client.

- **RFC 4122 UUIDs**
  - `nacoskit.rfcuuid`: an immutable `UUID` type that parses canonical,
    hash-like, braced and URN text (`from_string`, `from_string_or_nil`) and raw
    bytes (`from_bytes`, `from_bytes_or_nil`). It reads and sets the version
    and variant bits (`version`, `variant`, `with_version`, `with_variant`).
    It also provides `NIL` and the predefined `NAMESPACE_DNS`, `NAMESPACE_URL`,
    `NAMESPACE_OID` and `NAMESPACE_X500`. Bad input raises `UUIDError`.
  - `nacoskit.uuidgen`: `RFC4122Generator` and the module-level functions
    `new_v1` to `new_v5`. These produce time-based, DCE security, MD5 name-based,
    random and SHA-1 name-based UUIDs.
  - `nacoskit.uuidsql`: `to_sql_value` and `scan` convert between UUIDs and
    database column values. `NullUUID` handles columns that may be NULL.
- **Request parameters**
  - `nacoskit.params`: `param_field` declares a dataclass field together with
    its request parameter name. `transform_object_to_param` turns such a
    dataclass into a flat string map. Numbers and booleans are always included.
    Strings and string lists are included only when non-empty. Mappings are
    encoded as compact JSON.
  - `nacoskit.config_param` and `nacoskit.service_param`: parameter dataclasses
    for configuration and instance operations. Examples are `ConfigParam`,
    `SearchConfigParam`, `RegisterInstanceParam` and `SelectInstancesParam`.
    Each one has a `to_params()` method.
- **Models**
  - `nacoskit.model_config`: `ConfigItem`, `ConfigPage`, `ConfigListenContext`
    and `ConfigContext`.
  - `nacoskit.model_service`: `Instance`, `Service`, `ServiceDetail`,
    `ServiceInfo`, `Cluster`, `BeatInfo`, `ExpressionSelector`, `ServiceList`
    and `State`.

  Both modules read from decoded JSON dictionaries (`from_dict`) and write back
  to them (`to_dict`).
- **Helpers**
  - `nacoskit.common`: `current_millis`, `json_to_service`, `to_json_string`,
    `local_ip`, `get_duration_with_default`, `get_url_formed_map`,
    `get_status_code` and `deep_copy_map`.
  - `nacoskit.digest`: `md5` gives the hex MD5 digest of a string.
  - `nacoskit.content`: `truncate_content` keeps at most the first 100 bytes of
    content for logging.
  - `nacoskit.semaphore`: `Semaphore` is a counting semaphore with blocking
    `acquire`, non-blocking `try_acquire`, `release` and `available_permits`.
    It can also be used as a context manager.

## Installation

```
pip install nacoskit
```

## Examples

Parsing and generating UUIDs:

```python
from nacoskit.rfcuuid import NAMESPACE_DNS, Version, from_string
from nacoskit.uuidgen import new_v4, new_v5

u = from_string("urn:uuid:6ba7b810-9dad-11d1-80b4-00c04fd430c8")
print(str(u))                               # 6ba7b810-9dad-11d1-80b4-00c04fd430c8
print(u.to_text())                          # b'6ba7b810-9dad-11d1-80b4-00c04fd430c8'

print(str(new_v5(NAMESPACE_DNS, "www.example.com")))  # 2ed6657d-e927-568b-95e1-2665a8aea6a2
print(new_v4().version() == Version.V4)     # True
```

Building request parameters:

```python
from nacoskit.service_param import RegisterInstanceParam

param = RegisterInstanceParam(
    ip="10.0.0.10", port=8848, weight=1.0, enable=True, healthy=True,
    service_name="demo.service", metadata={"zone": "a"},
)
print(param.to_params())
```

Reading a service from JSON:

```python
from nacoskit.common import json_to_service

service = json_to_service('{"name": "demo", "hosts": [{"ip": "10.0.0.10", "port": 80}]}')
print(service.hosts[0].port)    # 80
```

Checksums and content helpers:

```python
from nacoskit.content import truncate_content
from nacoskit.digest import md5

md5("demo")                      # 'fe01ce2a7fbac8fafaed7c982a04e229'
truncate_content("x" * 500)      # the first 100 bytes
```

## What this package does not do

The package contains no client. It opens no network connections and does not
talk to a configuration or naming server. It has no command-line tool, and it
does not store caches or snapshots on disk. It supplies the data types,
parameter mapping and helpers that such a client would be built from.

## Running the tests

```
pip install -e ".[test]"
pytest
```