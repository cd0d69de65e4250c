"""Tests for the Instance Profiles API handle."""

URL = "https://acme.cloud.databricks.com/api/2.0/instance-profiles/"
ARN = "arn:aws:iam::123456789012:instance-profile/etl"


def test_add(make_client):
    client, transport = make_client()
    client.profiles().add(ARN)

    assert str(transport.last.url) == URL + "add"
    assert transport.last_json() == {
        "instance_profile_arn": ARN,
        "skip_validation": False,
    }


def test_remove(make_client):
    client, transport = make_client()
    client.profiles().remove(ARN)

    assert str(transport.last.url) == URL + "remove"
    assert transport.last_json() == {"instance_profile_arn": ARN}


def test_list_unwraps_instance_profiles(make_client):
    client, transport = make_client(
        200,
        {"instance_profiles": [{"instance_profile_arn": ARN}]},
    )
    actual = client.profiles().list()

    assert transport.last.method == "GET"
    assert str(transport.last.url) == URL + "list"
    assert actual[0].instance_profile_arn == ARN
