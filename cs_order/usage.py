from cs_order import settings


def main() -> str:
    return f"""
Usage: cs_order [-h] [options] [commands]...
Declare ordering constraints between cluster resources and list the
resources they depend on.

Options:
    -h, --help         Display usage and exit.
    --debug            Print all reports, including informational ones, and
                       debug messages.
    --version          Print cs_order version information.
    --output-format=text|json
                       Set the format of the output. Default is 'text'.
    --service=<name>   Name of the cluster membership service order constraints
                       require. Default is '{settings.cluster_membership_service}'.

Commands:
    declare <constraint id> <resource id> <resource id>... [options]
        Validate an order constraint putting the resources in order and print
        its attributes together with the resources it requires. The resources
        are stored sorted. Options:
            resources-type=primitive|group  type of the ordered resources,
                default is '{settings.default_resources_type}'
            cib=<shadow cib>  shadow CIB to create the constraint in
            score=<score>  integer or INFINITY, default is
                '{settings.default_score}'
            symmetrical=<boolean>  stop the resources in the reverse order,
                default is 'true'
            ensure=present|absent  default is '{settings.default_ensure}'
        If --service is specified, it replaces the cluster membership service
        ('{settings.cluster_membership_service}') the constraint requires.

    describe
        Print the attributes of an order constraint, their defaults and
        allowed values.

    help
        Display usage and exit.
"""
