cs_order_version = "0.1.0"

# service which has to run before any cluster resource can be managed
cluster_membership_service = "corosync"

# pacemaker needs at least two resources to put them in order
order_min_resources = 2
default_score = "INFINITY"
default_resources_type = "primitive"
default_symmetrical = True
default_ensure = "present"

# resource ids of master/slave wrappers carry this prefix
master_slave_prefix = "ms_"
# clone instances are referred to as '<resource id>:<instance number>'
clone_instance_separator = ":"

logger_name = "cs_order"
