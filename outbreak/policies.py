#POLICIES THAT CAN BE IMPLEMENTED DURING THE OUTBREAK

"""
This module holds the policy catalog and the aggregation of policy effects.

Every policy shares the same record (PolicyOption), so adding a new one
only means adding an entry to the catalog, the simulation core never checks
for a specific id. There are two kinds of policies:
    - ongoing measures (masks, lockdown...) that can be switched on and off
      any number of times,
    - one-time programmes (vaccination) that, once launched, can never be
      undone or launched again.
"""

from .config import (
    POLICY_EFFECT_CAP,
    VACCINATION_INITIAL_COST,
    VACCINATION_DAILY_CAPACITY,
    VACCINATION_COST_PER_DOSE,
    VACCINATION_DELAY,
)


class PolicyOption:
    def __init__(self, policy_id, name, description="",
                 one_time=False,
                 contact_reduction=0.0,
                 transmission_reduction=0.0,
                 exposed_detection_rate=0.0,
                 daily_cost_per_person=0.0,
                 daily_cost_per_case=0.0,
                 implementation_delay=0,
                 vaccination_rate=0.0,
                 cost_per_vaccination=0.0,
                 initial_cost=0.0):
        self.id = policy_id
        self.name = name
        self.description = description
        self.one_time = one_time

        #Effects on transmission
        self.contact_reduction = contact_reduction
        self.transmission_reduction = transmission_reduction
        self.exposed_detection_rate = exposed_detection_rate

        #Costs
        self.daily_cost_per_person = daily_cost_per_person
        self.daily_cost_per_case = daily_cost_per_case
        self.initial_cost = initial_cost

        #Days before a one-time programme starts delivering
        self.implementation_delay = implementation_delay

        #Only for vaccination programmes
        self.vaccination_rate = vaccination_rate
        self.cost_per_vaccination = cost_per_vaccination

    @property
    def is_vaccination(self) -> bool:
        return self.one_time and self.vaccination_rate > 0

    def daily_cost(self, population, active_cases) -> float:
        return self.daily_cost_per_person * population + self.daily_cost_per_case * active_cases

    def __repr__(self):
        return f"PolicyOption({self.id!r})"


#Ordered, read-only collection of policies with a single lookup by id
class PolicyCatalog:
    def __init__(self, policies):
        self._policies = tuple(policies)
        self._by_id = {p.id: p for p in self._policies}
        if len(self._by_id) != len(self._policies):
            raise ValueError("Policy ids must be unique")

    def get(self, policy_id):
        return self._by_id.get(policy_id)

    def __contains__(self, policy_id):
        return policy_id in self._by_id

    def __iter__(self):
        return iter(self._policies)

    def __len__(self):
        return len(self._policies)

    def with_policies(self, *policies):
        return PolicyCatalog(self._policies + tuple(policies))


#implementation_delay is only waited for by the vaccination programme.
#Ongoing measures carry it for display and act from the next tick.
DEFAULT_CATALOG = PolicyCatalog([
    PolicyOption(
        "masks",
        "Mandatory Mask Wearing",
        "Require masks in all public spaces.",
        transmission_reduction=0.3,
        daily_cost_per_person=3,
        implementation_delay=3,
    ),
    PolicyOption(
        "rapid_containment",
        "Rapid Detection & Containment",
        "Implement aggressive testing and isolation.",
        contact_reduction=0.8,
        exposed_detection_rate=0.5,
        daily_cost_per_person=5,
        daily_cost_per_case=200,
        implementation_delay=5,
    ),
    PolicyOption(
        "vaccination",
        "Mass Vaccination Program",
        "Launch an immediate vaccination program.",
        one_time=True,
        implementation_delay=VACCINATION_DELAY,
        vaccination_rate=VACCINATION_DAILY_CAPACITY,
        cost_per_vaccination=VACCINATION_COST_PER_DOSE,
        initial_cost=VACCINATION_INITIAL_COST,
    ),
    PolicyOption(
        "lockdown",
        "Full Lockdown",
        "Implement a complete lockdown of non-essential activities.",
        contact_reduction=0.95,
        daily_cost_per_person=100,
        implementation_delay=10,
    ),
])


def get_policy(policy_id, catalog=None):
    return (DEFAULT_CATALOG if catalog is None else catalog).get(policy_id)


class PolicyEffects:
    def __init__(self, contact_reduction=0.0, transmission_reduction=0.0,
                 exposed_detection_rate=0.0, daily_costs=0.0, costs_by_policy=None):
        self.contact_reduction = contact_reduction
        self.transmission_reduction = transmission_reduction
        self.exposed_detection_rate = exposed_detection_rate
        self.daily_costs = daily_costs
        self.costs_by_policy = costs_by_policy or {}


#Combined effect of the active policies on today's transmission
def calculate_policy_effects(active_policies, exposed, infected, population, catalog=None) -> PolicyEffects:
    catalog = DEFAULT_CATALOG if catalog is None else catalog

    contact_reduction = 0.0
    transmission_reduction = 0.0
    exposed_detection_rate = 0.0
    costs_by_policy = {}

    #Sorted so the cost map is built in the same order every tick
    for policy_id in sorted(active_policies):
        policy = catalog.get(policy_id)

        #Stale ids and one-time programmes do not contribute
        if policy is None or policy.one_time:
            continue

        contact_reduction += policy.contact_reduction
        transmission_reduction += policy.transmission_reduction

        #Detection does not stack, the best policy wins
        exposed_detection_rate = max(exposed_detection_rate, policy.exposed_detection_rate)

        costs_by_policy[policy.id] = policy.daily_cost(population, exposed + infected)

    return PolicyEffects(
        contact_reduction=min(contact_reduction, POLICY_EFFECT_CAP),
        transmission_reduction=min(transmission_reduction, POLICY_EFFECT_CAP),
        exposed_detection_rate=min(exposed_detection_rate, POLICY_EFFECT_CAP),
        daily_costs=sum(costs_by_policy.values()),
        costs_by_policy=costs_by_policy,
    )
