import json

import pytest

from nacoskit.service_param import (
    DeregisterInstanceParam,
    GetAllServiceInfoParam,
    GetServiceParam,
    RegisterInstanceParam,
    SelectAllInstancesParam,
    SelectInstancesParam,
    SelectOneHealthInstanceParam,
    SubscribeParam,
    UpdateInstanceParam,
)


@pytest.mark.parametrize("cls", [RegisterInstanceParam, UpdateInstanceParam])
def test_instance_params(cls):
    param = cls(
        ip="10.0.0.1",
        port=8848,
        weight=10.0,
        enable=True,
        healthy=False,
        metadata={"k": "v"},
        cluster_name="c",
        service_name="demo",
        group_name="g",
        ephemeral=True,
    )
    params = param.to_params()
    assert json.loads(params.pop("metadata")) == {"k": "v"}
    assert params == {
        "ip": "10.0.0.1",
        "port": "8848",
        "weight": "10",
        "enabled": "true",
        "healthy": "false",
        "clusterName": "c",
        "serviceName": "demo",
        "groupName": "g",
        "ephemeral": "true",
    }


def test_register_without_metadata_leaves_it_out():
    params = RegisterInstanceParam(ip="10.0.0.1", service_name="demo").to_params()
    assert "metadata" not in params
    assert params["ip"] == "10.0.0.1"


def test_deregister_uses_cluster_key():
    params = DeregisterInstanceParam(ip="10.0.0.1", port=80, cluster="c").to_params()
    assert params["cluster"] == "c"
    assert "clusterName" not in params
    assert params["port"] == "80"


@pytest.mark.parametrize(
    "cls", [GetServiceParam, SelectAllInstancesParam, SelectOneHealthInstanceParam]
)
def test_clusters_joined_with_commas(cls):
    params = cls(clusters=["a", "b"], service_name="demo").to_params()
    assert params == {"clusters": "a,b", "serviceName": "demo"}


def test_empty_clusters_left_out():
    assert "clusters" not in GetServiceParam(service_name="demo").to_params()


def test_get_all_service_info_param():
    params = GetAllServiceInfoParam(namespace="ns", page_no=1, page_size=10).to_params()
    assert params == {"nameSpace": "ns", "pageNo": "1", "pageSize": "10"}


def test_subscribe_leaves_out_callback():
    param = SubscribeParam(
        service_name="demo", clusters=["a"], subscribe_callback=lambda services, err: None
    )
    assert param.to_params() == {"serviceName": "demo", "clusters": "a"}


def test_select_instances_healthy_only():
    params = SelectInstancesParam(service_name="demo", healthy_only=True).to_params()
    assert params == {"serviceName": "demo", "healthyOnly": "true"}