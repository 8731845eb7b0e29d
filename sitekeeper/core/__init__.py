"""
Core of sitekeeper.

Every site lives in its own directory under the sites root with a docker-compose file,
all of them share one docker network and one global stack (gateway + mysql).

All commands are made by sequence of such atomic commands, run one by one:
> docker-compose up -d
> docker-compose down
> docker-compose restart
> docker-compose logs mysql
> docker network ls --filter name=%network%
> docker network create %network%
> docker network rm %network%

Used docker-compose commands described in compose_interface, network ones in network_interface
"""
