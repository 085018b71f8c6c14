import numpy as np
import openmdao.api as om
from closest_pair import closest, brute


class ClosestDistComp(om.ExplicitComponent):
    """ Closest-pair separation of every node of a set of trajectories.
    """
    def initialize(self):
        self.options.declare('num_nodes', types=int)
        self.options.declare('num_v', types=int, default=4, lower=2)
        self.options.declare('method', values=['dc', 'brute'], default='dc',
                             desc='divide and conquer or brute force pair search')
        self.options.declare('limit', types=float, default=1.0)

    def setup(self):
        nn = self.options['num_nodes']
        nv = self.options['num_v']

        # States
        self.add_input('X',
               val=np.zeros((nn, nv)))
        self.add_input('Y',
               val=np.zeros((nn, nv)))

        self.add_output('min_dist', val=np.zeros(nn))
        self.add_output('violation', val=np.zeros(nn))

        arange1 = np.arange(nn * nv, dtype=int)
        arange2 = []
        for i in range(nn):
            arange2 += nv * [i]

        # min is only piecewise smooth, so no analytic jacobian
        self.declare_partials(['min_dist', 'violation'], ['X', 'Y'],
                              rows=arange2, cols=arange1, method='fd')

    def compute(self, inputs, outputs):
        nn = self.options['num_nodes']
        limit = self.options['limit']
        solver = closest if self.options['method'] == 'dc' else brute

        X = inputs['X']
        Y = inputs['Y']

        min_dist = np.zeros(nn)
        for i in range(nn):
            min_dist[i] = solver(list(zip(X[i], Y[i])))

        outputs['min_dist'] = min_dist
        outputs['violation'] = (limit - min_dist)/limit


if __name__ == '__main__':

    np.random.seed(0)

    nn = 7
    nv = 10

    p = om.Problem()
    p.model = om.Group()

    p.model.add_subsystem('distance', ClosestDistComp(num_nodes=nn,
                                                      num_v=nv,
                                                      limit=20.0),
                          promotes=['*'])
    p.setup()

    p['X'] = np.random.uniform(-50, 50, (nn, nv))
    p['Y'] = np.random.uniform(-50, 50, (nn, nv))

    p.run_model()

    print(p['min_dist'])
    print(p['violation'])
