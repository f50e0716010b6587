from cs_order import settings


def normalize_resource_name(raw_name: str) -> str:
    """
    Return the id of the resource a (possibly decorated) reference points to

    Clone instances are referred to as 'resource:instance' and master/slave
    wrappers are named 'ms_resource'. Both decorations are removed, so that
    the result can be used to look up the underlying resource declaration.

    raw_name -- resource reference as specified in an order constraint
    """
    name = raw_name.split(settings.clone_instance_separator, 1)[0]
    if name.startswith(settings.master_slave_prefix):
        name = name[len(settings.master_slave_prefix) :]
    return name
